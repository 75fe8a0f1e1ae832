from typing import List, Sequence

from app.schemas.blog import PostSummary, SearchResult

RECENT_HEADING = "Recent blogs"
RESULTS_HEADING = "Search result"
EMPTY_HEADING = "No blogs found"


def filter_posts(posts: Sequence[PostSummary], query: str) -> List[PostSummary]:
    """Posts whose title contains the query, ignoring case, in their original order."""
    if not query:
        return list(posts)
    needle = query.lower()
    return [post for post in posts if needle in post.title.lower()]


def search_posts(posts: Sequence[PostSummary], query: str) -> SearchResult:
    matches = filter_posts(posts, query)
    if not query:
        state, heading = "recent", RECENT_HEADING
    elif matches:
        state, heading = "results", RESULTS_HEADING
    else:
        state, heading = "empty", EMPTY_HEADING
    return SearchResult(query=query, state=state, heading=heading, posts=matches)
