import datetime

import pytest

from app.exceptions import ContentReadError, MalformedPostError
from app.repos.posts_repo import FileSystemPostsRepo
from app.schemas.blog import PostDetail, PostSummary
from app.services.posts_service import PostsService, calculate_reading_time
from tests.conftest import FakeRepo, write_post

HELLO = """
---
title: Hello World
date: 2021-01-01
---
Hello there.
"""

GETTING_STARTED = """
---
title: Getting Started
date: 2021-06-01
description: How to begin
---
First steps.
"""


def test_list_posts_sorts_by_date_desc():
    service = PostsService(
        repo=FakeRepo({"hello-world.md": HELLO, "getting-started.md": GETTING_STARTED})
    )

    result = service.list_posts()

    assert [post.title for post in result] == ["Getting Started", "Hello World"]
    assert [post.slug for post in result] == ["getting-started", "hello-world"]
    assert isinstance(result[0], PostSummary)
    assert result[0].date == datetime.date(2021, 6, 1)
    assert result[0].description == "How to begin"
    assert result[1].description is None


def test_list_posts_keeps_input_order_for_equal_dates():
    same_day = """
    ---
    title: {title}
    date: 2022-03-03
    ---
    body
    """
    files = {
        "a.md": same_day.format(title="A"),
        "b.md": same_day.format(title="B"),
        "c.md": same_day.format(title="C"),
        "newest.md": """
        ---
        title: Newest
        date: 2023-01-01
        ---
        body
        """,
    }
    service = PostsService(repo=FakeRepo(files))

    result = service.list_posts()

    assert [post.slug for post in result] == ["newest", "a", "b", "c"]


def test_list_posts_is_deterministic(tmp_path):
    write_post(tmp_path, "hello-world.md", HELLO)
    write_post(tmp_path, "getting-started.md", GETTING_STARTED)
    service = PostsService(repo=FileSystemPostsRepo(tmp_path))

    assert service.list_posts() == service.list_posts()


def test_list_posts_skips_malformed_posts_by_default(caplog):
    files = {
        "hello-world.md": HELLO,
        "no-title.md": """
        ---
        date: 2021-02-02
        ---
        body
        """,
        "bad-date.md": """
        ---
        title: Bad Date
        date: someday
        ---
        body
        """,
        "no-front-matter.md": "Just a body.",
    }
    service = PostsService(repo=FakeRepo(files), malformed_policy="skip")

    with caplog.at_level("WARNING"):
        result = service.list_posts()

    assert [post.slug for post in result] == ["hello-world"]
    assert "no-title.md" in caplog.text
    assert "bad-date.md" in caplog.text


def test_list_posts_aborts_on_malformed_post_when_configured():
    files = {
        "hello-world.md": HELLO,
        "no-title.md": """
        ---
        date: 2021-02-02
        ---
        body
        """,
    }
    service = PostsService(repo=FakeRepo(files), malformed_policy="abort")

    with pytest.raises(MalformedPostError) as exc:
        service.list_posts()

    assert "title" in exc.value.reason


def test_list_posts_treats_duplicate_slug_as_malformed():
    service = PostsService(
        repo=FakeRepo({"hello.md": HELLO, "hello.mdx": GETTING_STARTED}),
        malformed_policy="skip",
    )

    result = service.list_posts()

    assert [post.title for post in result] == ["Hello World"]


def test_list_posts_raises_when_store_missing(tmp_path):
    service = PostsService(repo=FileSystemPostsRepo(tmp_path / "missing"))

    with pytest.raises(ContentReadError):
        service.list_posts()


def test_list_slugs_follows_listing_order():
    service = PostsService(
        repo=FakeRepo({"hello-world.md": HELLO, "getting-started.md": GETTING_STARTED})
    )

    assert service.list_slugs() == ["getting-started", "hello-world"]


def test_get_post_returns_detail_with_rendered_html():
    markdown = """
    ---
    title: Rendered
    date: 2024-08-01
    ---
    ## Heading

    Some *emphasis*.
    """
    service = PostsService(repo=FakeRepo({"rendered.md": markdown}))

    result = service.get_post("rendered")

    assert isinstance(result, PostDetail)
    assert result.slug == "rendered"
    assert result.title == "Rendered"
    assert '<h2 id="heading">Heading</h2>' in result.content
    assert "<em>emphasis</em>" in result.content
    assert result.readingTime.text == "1 min read"


def test_get_post_returns_none_when_not_found():
    service = PostsService(repo=FakeRepo({}))

    assert service.get_post("missing") is None


def test_get_post_raises_for_malformed_post_even_when_skipping():
    service = PostsService(
        repo=FakeRepo({"broken.md": "---\ndate: 2021-01-01\n---\nbody"}),
        malformed_policy="skip",
    )

    with pytest.raises(MalformedPostError):
        service.get_post("broken")


def test_words_per_minute_is_configurable():
    body = "word " * 300
    markdown = f"---\ntitle: Long\ndate: 2021-01-01\n---\n{body}"
    service = PostsService(repo=FakeRepo({"long.md": markdown}), words_per_minute=100)

    [post] = service.list_posts()

    assert post.readingTime.minutes == 3
    assert post.readingTime.words == 300


@pytest.mark.parametrize(
    ("word_count", "expected"),
    [
        (0, "1 min read"),
        (1, "1 min read"),
        (200, "1 min read"),
        (201, "2 min read"),
        (400, "2 min read"),
        (401, "3 min read"),
    ],
)
def test_calculate_reading_time_rounds_up(word_count, expected):
    text = "word " * word_count
    reading_time = calculate_reading_time(text.strip())
    assert reading_time.text == expected
    assert reading_time.words == word_count
    assert reading_time.minutes >= 1


def test_get_post_uses_same_file_as_listing_when_stem_is_shared():
    files = {
        "a.md": """
        ---
        date: 2021-01-01
        ---
        no title here
        """,
        "a.mdx": """
        ---
        title: Good
        date: 2021-02-01
        ---
        good body
        """,
    }
    service = PostsService(repo=FakeRepo(files), malformed_policy="skip")

    assert [post.title for post in service.list_posts()] == ["Good"]
    assert service.list_slugs() == ["a"]

    post = service.get_post("a")

    assert post.title == "Good"
    assert "good body" in post.content


def test_numeric_title_and_description_are_kept():
    files = {
        "n.md": "---\ntitle: 1984\ndate: 2021-01-01\ndescription: 42\n---\nbody",
    }
    service = PostsService(repo=FakeRepo(files), malformed_policy="abort")

    [post] = service.list_posts()

    assert post.title == "1984"
    assert post.description == "42"
