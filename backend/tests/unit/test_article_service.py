"""Unit tests for the ArticleService: workflow transitions and the article/slug pair."""

import pytest

from backoffice.application.interfaces import WriteStatus
from backoffice.application.schemas import ArticleCreate, ArticleUpdate
from backoffice.application.services import ArticleService
from backoffice.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InputValidationError,
    ShipBeforeValidationError,
    StorageError,
    UnauthenticatedError,
)


@pytest.fixture
def service(article_repo, slug_repo) -> ArticleService:
    return ArticleService(article_repo, slug_repo)


async def _create(service, article_payload, actor, **overrides) -> int:
    outcome = await service.create_article(ArticleCreate(**{**article_payload, **overrides}), actor)
    assert outcome.success
    return outcome.article_id


# ── create ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_writes_draft_article_and_slug_row(service, article_repo, slug_repo, article_payload, admin):
    outcome = await service.create_article(ArticleCreate(**article_payload), admin)

    assert outcome.success
    article = article_repo.rows[outcome.article_id]
    assert article.validated is False
    assert article.shipped is False
    assert article.published_at is None
    assert article.author == "admin"
    assert article.author_email == "admin@example.org"

    slug = slug_repo.rows[outcome.article_id]
    assert slug.validated is False
    assert slug.slug == article.slug
    assert slug.created_at == article.created_at


@pytest.mark.asyncio
async def test_create_derives_slug_from_title(service, article_repo, article_payload, admin):
    article_id = await _create(service, article_payload, admin)
    assert article_repo.rows[article_id].slug == "wash-the-sins"


@pytest.mark.asyncio
async def test_create_rejects_duplicate_slug(service, article_repo, article_payload, admin):
    await _create(service, article_payload, admin)

    with pytest.raises(DuplicateEntityError):
        await service.create_article(ArticleCreate(**{**article_payload, "title": "wash the sins"}), admin)
    assert article_repo.calls == ["insert"]


@pytest.mark.asyncio
async def test_create_skips_slug_when_article_insert_not_created(service, article_repo, slug_repo, article_payload, admin):
    article_repo.statuses["insert"] = WriteStatus.NO_CONTENT

    outcome = await service.create_article(ArticleCreate(**article_payload), admin)

    assert not outcome.success
    assert not outcome.article_created
    assert slug_repo.calls == []


@pytest.mark.asyncio
async def test_create_reports_slug_failure_without_hiding_article(service, article_repo, slug_repo, article_payload, admin):
    slug_repo.fail_on.add("insert")

    outcome = await service.create_article(ArticleCreate(**article_payload), admin)

    assert outcome.article_created
    assert not outcome.slug_created
    assert not outcome.success
    assert isinstance(outcome.slug_error, StorageError)
    assert outcome.article_id in article_repo.rows


@pytest.mark.asyncio
async def test_create_without_actor_touches_nothing(service, article_repo, slug_repo, article_payload):
    with pytest.raises(UnauthenticatedError):
        await service.create_article(ArticleCreate(**article_payload), None)
    assert article_repo.calls == []
    assert slug_repo.calls == []


# ── update ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize("validated,shipped", [(False, False), (True, False), (True, True)])
async def test_update_resets_workflow_flags(service, article_repo, article_payload, admin, validated, shipped):
    article_id = await _create(service, article_payload, admin)
    article_repo.rows[article_id].validated = validated
    article_repo.rows[article_id].shipped = shipped

    result = await service.update_article(article_id, ArticleUpdate(introduction="A brand new introduction text."), admin)

    assert result.ok
    stored = article_repo.rows[article_id]
    assert stored.introduction == "A brand new introduction text."
    assert stored.validated is False
    assert stored.shipped is False
    assert stored.updated_by == "admin@example.org"


@pytest.mark.asyncio
async def test_update_leaves_slug_row_validated_flag_alone(service, slug_repo, article_payload, admin):
    article_id = await _create(service, article_payload, admin)
    await service.validate_article(article_id, True, admin)
    slug_repo.calls.clear()

    await service.update_article(article_id, ArticleUpdate(main="x" * 60), admin)

    assert slug_repo.calls == []
    assert slug_repo.rows[article_id].validated is True


@pytest.mark.asyncio
async def test_update_unknown_article_raises(service, admin):
    with pytest.raises(EntityNotFoundError):
        await service.update_article(42, ArticleUpdate(introduction="A brand new introduction text."), admin)


# ── validate ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [True, False])
async def test_validate_mirrors_flag_to_slug(service, article_repo, slug_repo, article_payload, admin, value):
    article_id = await _create(service, article_payload, admin)
    slug_repo.rows[article_id].validated = not value

    outcome = await service.validate_article(article_id, value, admin)

    assert outcome.success
    assert outcome.slug_synced
    assert article_repo.rows[article_id].validated is value
    assert slug_repo.rows[article_id].validated is value


@pytest.mark.asyncio
async def test_validate_leaves_slug_untouched_when_article_write_not_created(service, article_repo, slug_repo, article_payload, admin):
    article_id = await _create(service, article_payload, admin)
    article_repo.statuses["update"] = WriteStatus.OK
    slug_repo.calls.clear()

    outcome = await service.validate_article(article_id, True, admin)

    assert outcome.success
    assert not outcome.slug_synced
    assert slug_repo.calls == []
    assert article_repo.rows[article_id].validated is True
    assert slug_repo.rows[article_id].validated is False


@pytest.mark.asyncio
async def test_validate_reports_slug_mirror_failure(service, slug_repo, article_payload, admin):
    article_id = await _create(service, article_payload, admin)
    slug_repo.fail_on.add("update_validated")

    outcome = await service.validate_article(article_id, True, admin)

    assert outcome.success
    assert not outcome.slug_synced
    assert isinstance(outcome.slug_error, StorageError)


# ── ship ─────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_ship_requires_validation_and_writes_nothing(service, article_repo, article_payload, admin):
    article_id = await _create(service, article_payload, admin)
    article_repo.calls.clear()

    with pytest.raises(ShipBeforeValidationError):
        await service.ship_article(article_id, True, admin)

    assert article_repo.calls == []
    assert article_repo.rows[article_id].shipped is False


@pytest.mark.asyncio
async def test_validate_then_ship_then_update_back_to_draft(service, article_repo, article_payload, admin):
    article_id = await _create(service, article_payload, admin)

    await service.validate_article(article_id, True, admin)
    result = await service.ship_article(article_id, True, admin)
    assert result.ok
    assert article_repo.rows[article_id].is_live

    await service.update_article(article_id, ArticleUpdate(introduction="new introduction, long enough"), admin)
    assert article_repo.rows[article_id].is_draft


@pytest.mark.asyncio
async def test_ship_never_sets_published_at(service, article_repo, article_payload, admin):
    article_id = await _create(service, article_payload, admin)
    await service.validate_article(article_id, True, admin)

    await service.ship_article(article_id, True, admin)

    assert article_repo.rows[article_id].published_at is None


@pytest.mark.asyncio
async def test_unship_does_not_need_validation(service, article_repo, article_payload, admin):
    article_id = await _create(service, article_payload, admin)

    result = await service.ship_article(article_id, False, admin)

    assert result.ok
    assert article_repo.rows[article_id].shipped is False


# ── delete ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_delete_removes_both_rows(service, article_repo, slug_repo, article_payload, admin):
    article_id = await _create(service, article_payload, admin)

    outcome = await service.delete_article(article_id, admin)

    assert outcome.success
    assert article_id not in article_repo.rows
    assert article_id not in slug_repo.rows


@pytest.mark.asyncio
async def test_delete_fails_when_slug_side_rejects(service, article_repo, slug_repo, article_payload, admin):
    article_id = await _create(service, article_payload, admin)
    slug_repo.fail_on.add("delete_by_article")

    outcome = await service.delete_article(article_id, admin)

    assert not outcome.success
    assert outcome.errored
    assert isinstance(outcome.slug_error, StorageError)
    assert outcome.article_status == WriteStatus.OK
    assert article_id not in article_repo.rows


@pytest.mark.asyncio
async def test_delete_of_missing_article_is_not_a_success(service, admin):
    outcome = await service.delete_article(999, admin)

    assert not outcome.success
    assert not outcome.errored
    assert outcome.article_status == WriteStatus.NO_CONTENT


# ── reads ────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_article_not_found(service):
    with pytest.raises(EntityNotFoundError):
        await service.get_article(999)


@pytest.mark.asyncio
async def test_get_article_by_slug(service, article_payload, admin):
    article_id = await _create(service, article_payload, admin)
    article = await service.get_article_by_slug("wash-the-sins")
    assert article.id == article_id


# ── rows that vanish or never get a slug ─────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize("title", ["!!", "( ... )", "*~*"])
async def test_create_rejects_title_without_slug_characters(service, article_repo, slug_repo, article_payload, admin, title):
    with pytest.raises(InputValidationError) as excinfo:
        await service.create_article(ArticleCreate(**{**article_payload, "title": title}), admin)

    assert "title" in excinfo.value.field_errors
    assert article_repo.calls == []
    assert slug_repo.calls == []


@pytest.mark.asyncio
async def test_update_of_row_removed_meanwhile_is_not_a_success(service, article_repo, article_payload, admin):
    article_id = await _create(service, article_payload, admin)
    article_repo.statuses["update"] = WriteStatus.NO_CONTENT

    result = await service.update_article(article_id, ArticleUpdate(introduction="A brand new introduction text."), admin)

    assert not result.ok
    assert result.matched_nothing


@pytest.mark.asyncio
async def test_validate_of_row_removed_meanwhile_is_not_a_success(service, article_repo, slug_repo, article_payload, admin):
    article_id = await _create(service, article_payload, admin)
    article_repo.statuses["update"] = WriteStatus.NO_CONTENT
    slug_repo.calls.clear()

    outcome = await service.validate_article(article_id, True, admin)

    assert not outcome.success
    assert outcome.article_missing
    assert slug_repo.calls == []
