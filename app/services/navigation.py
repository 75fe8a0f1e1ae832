from typing import List

from app.schemas.pages import NavLink

NAV_ITEMS = (
    ("Home", "/"),
    ("Work", "/work"),
    ("Blog", "/blog"),
)


def build_nav(current_route: str) -> List[NavLink]:
    # Post pages live under /blog but only exact routes are highlighted
    return [
        NavLink(label=label, route=route, active=route == current_route)
        for label, route in NAV_ITEMS
    ]
