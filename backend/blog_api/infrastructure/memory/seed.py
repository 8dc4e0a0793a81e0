"""Sample articles loaded into a fresh store on startup."""

from blog_api.domain.entities import ArticleDraft

SAMPLE_ARTICLES: tuple[ArticleDraft, ...] = (
    ArticleDraft(
        title="Introduction to Next.js 15",
        content="Next.js 15 brings a long list of improvements...",
        excerpt="Discover what is new in Next.js 15",
        published=True,
        tags=("nextjs", "react", "javascript"),
    ),
    ArticleDraft(
        title="TypeScript for Beginners",
        content="TypeScript is a superset of JavaScript...",
        excerpt="Learn the basics of TypeScript",
        published=True,
        tags=("typescript", "javascript"),
    ),
    ArticleDraft(
        title="Draft Article",
        content="This is a draft...",
        published=False,
        tags=("draft",),
    ),
)
