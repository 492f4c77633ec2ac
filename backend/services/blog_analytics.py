"""Blog list statistics and title search.

Pure functions over already-fetched records. Nothing here catches: a
malformed record (e.g. missing ``title``) surfaces to the route layer.
"""

from typing import Iterable, Sequence, TypedDict

PRIVACY_KEYWORD = "privacy"


class BlogStats(TypedDict):
    numberOfBlogs: int
    longestBlogTitle: str | None
    numberOfBlogsWithPrivacy: int
    uniqueBlogTitles: list[str]


def analyze(blogs: Sequence[dict]) -> BlogStats:
    """Summary statistics for a blog list. Empty input is valid."""
    titles = [blog["title"] for blog in blogs]

    # max() keeps the first of equal-length titles
    longest = max(titles, key=len) if titles else None

    return {
        "numberOfBlogs": len(titles),
        "longestBlogTitle": longest,
        "numberOfBlogsWithPrivacy": sum(1 for t in titles if PRIVACY_KEYWORD in t.lower()),
        "uniqueBlogTitles": list(dict.fromkeys(titles)),
    }


def search(blogs: Iterable[dict], query: str) -> list[dict]:
    """Blogs whose title contains ``query``, case-insensitively, in input order."""
    needle = query.lower()
    return [blog for blog in blogs if needle in blog["title"].lower()]
