"""Unit tests for the Article entity, patches and listing filters."""

from datetime import datetime, timedelta, timezone

from blog_api.domain.entities import UNSET, Article, ArticleFilters, ArticlePatch, PaginationMeta

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


def make_article(**overrides) -> Article:
    values = dict(
        id="a1",
        title="Python Tips",
        content="Ten small tricks for everyday Python.",
        excerpt="Tricks",
        published=True,
        tags=["python", "tips"],
        created_at=T0,
        updated_at=T0,
    )
    values.update(overrides)
    return Article(**values)


# ── ArticlePatch / Article.apply ─────────────────────────────────────


def test_patch_changes_only_lists_supplied_fields():
    patch = ArticlePatch(title="New", published=False)
    assert patch.changes() == {"title": "New", "published": False}
    assert patch.content is UNSET


def test_empty_patch():
    assert ArticlePatch().is_empty()
    assert not ArticlePatch(tags=()).is_empty()


def test_apply_merges_and_keeps_created_at():
    article = make_article()
    later = T0 + timedelta(minutes=5)

    updated = article.apply(ArticlePatch(title="Renamed", tags=("python",)), now=later)

    assert updated.title == "Renamed"
    assert updated.tags == ["python"]
    assert updated.content == article.content
    assert updated.excerpt == "Tricks"
    assert updated.created_at == T0
    assert updated.updated_at == later


def test_apply_does_not_touch_original():
    article = make_article()
    article.apply(ArticlePatch(title="Renamed"), now=T0 + timedelta(seconds=1))
    assert article.title == "Python Tips"
    assert article.updated_at == T0


def test_apply_explicit_false_and_empty_tags_overwrite():
    updated = make_article().apply(ArticlePatch(published=False, tags=()), now=T0)
    assert updated.published is False
    assert updated.tags == []


def test_apply_never_moves_updated_at_before_created_at():
    updated = make_article().apply(ArticlePatch(), now=T0 - timedelta(days=1))
    assert updated.updated_at == T0


# ── ArticleFilters ───────────────────────────────────────────────────


def test_no_filters_match_everything():
    assert ArticleFilters().matches(make_article())


def test_published_filter_is_exact():
    assert ArticleFilters(published=True).matches(make_article(published=True))
    assert not ArticleFilters(published=True).matches(make_article(published=False))
    assert ArticleFilters(published=False).matches(make_article(published=False))


def test_tags_match_any():
    article = make_article(tags=["python", "tips"])
    assert ArticleFilters(tags=("rust", "tips")).matches(article)
    assert not ArticleFilters(tags=("rust", "go")).matches(article)


def test_search_is_case_insensitive_over_title_content_excerpt():
    article = make_article(title="Python Tips", content="Everyday tricks.", excerpt="A SHORT read")
    assert ArticleFilters(search="python").matches(article)
    assert ArticleFilters(search="EVERYDAY").matches(article)
    assert ArticleFilters(search="short").matches(article)
    assert not ArticleFilters(search="rust").matches(article)


def test_search_ignores_missing_excerpt():
    article = make_article(excerpt=None)
    assert not ArticleFilters(search="short").matches(article)
    assert ArticleFilters(search="tricks").matches(article)


def test_predicates_combine_with_and():
    article = make_article(published=True, tags=["python"], title="Python Tips")
    assert ArticleFilters(published=True, tags=("python",), search="tips").matches(article)
    assert not ArticleFilters(published=False, tags=("python",), search="tips").matches(article)
    assert not ArticleFilters(published=True, tags=("go",), search="tips").matches(article)
    assert not ArticleFilters(published=True, tags=("python",), search="rust").matches(article)


# ── PaginationMeta ───────────────────────────────────────────────────


def test_empty_result_still_has_one_page():
    meta = PaginationMeta.compute(page=3, limit=10, total=0)
    assert meta.total_pages == 1
    assert meta.page == 1
    assert meta.offset == 0


def test_page_clamped_to_last_page():
    meta = PaginationMeta.compute(page=9, limit=10, total=25)
    assert meta.total_pages == 3
    assert meta.page == 3
    assert meta.offset == 20


def test_page_below_one_clamped_to_first():
    assert PaginationMeta.compute(page=0, limit=5, total=12).page == 1
