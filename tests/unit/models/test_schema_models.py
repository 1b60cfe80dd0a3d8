"""Unit tests for schema models decoded from sample payloads."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pydantic
import pytest

from matrux.drukarnia.core.exceptions import DeserializationError, MissingField, TypeMismatch
from matrux.drukarnia.models import (
    ArticleComment,
    ArticleId,
    ArticleTag,
    AuthorArticle,
    BriefUser,
    CommentUser,
    FeedArticle,
    FollowerUser,
    FullArticle,
    FullTag,
    FullUser,
    PopularTag,
    RecommendedArticle,
    ReplyComment,
    SearchArticle,
    ShortArticle,
    ShortUser,
    TagArticle,
    TagId,
    UserId,
    UserTag,
    decode,
)

SHAPES = [
    (SearchArticle, "search_article"),
    (AuthorArticle, "author_article"),
    (RecommendedArticle, "recommended_article"),
    (ShortArticle, "short_article"),
    (TagArticle, "tag_article"),
    (FeedArticle, "feed_article"),
    (FullArticle, "full_article"),
    (BriefUser, "brief_user"),
    (ShortUser, "short_user"),
    (CommentUser, "comment_user"),
    (FollowerUser, "follower"),
    (FullUser, "full_user"),
    (UserTag, "user_tag"),
    (ArticleTag, "article_tag"),
    (PopularTag, "popular_tag"),
    (FullTag, "full_tag"),
    (ArticleComment, "article_comment"),
    (ReplyComment, "reply_comment"),
]


class TestShapes:
    """Test every model against its sample payload."""

    @pytest.mark.parametrize("shape,factory", SHAPES)
    def test_sample_decodes(self, payloads, shape, factory):
        """Test each sample payload decodes into its model."""
        record = decode(shape, getattr(payloads, factory)())
        assert isinstance(record, shape)

    @pytest.mark.parametrize("shape,factory", SHAPES)
    def test_undeclared_key_rejected(self, payloads, shape, factory):
        """Test an extra key is never ignored."""
        payload = getattr(payloads, factory)()
        payload["reactionsV2"] = []
        with pytest.raises(DeserializationError):
            decode(shape, payload)

    def test_models_are_frozen(self, payloads):
        """Test decoded records are immutable."""
        tag = decode(UserTag, payloads.user_tag())
        with pytest.raises(pydantic.ValidationError):
            tag.slug = None


class TestFieldTypes:
    """Test wire values are converted to precise types."""

    def test_feed_article_fields(self, payloads):
        """Test ids, durations and timestamps of a feed article."""
        article = decode(FeedArticle, payloads.feed_article(7))

        assert article.id == ArticleId(f"{7:024x}")
        assert article.main_tag_id == TagId(f"{1001:024x}")
        assert article.owner.id == UserId(f"{2007:024x}")
        assert article.read_time == timedelta(minutes=4)
        assert article.created_at == datetime(2023, 5, 6, 10, 0, tzinfo=UTC)
        assert article.created_at.tzinfo is not None
        assert [str(tag.name) for tag in article.tags] == ["Тег 1", "Тег 2"]
        assert article.thumb_picture is None

    def test_full_article_nested(self, payloads):
        """Test the article page decodes every nested collection."""
        article = decode(FullArticle, payloads.full_article())

        assert article.is_liked is False
        assert article.ads is None
        assert article.index is True
        assert isinstance(article.author_articles[0], SearchArticle)
        assert isinstance(article.recommended_articles[0], RecommendedArticle)
        assert isinstance(article.comments[0], ArticleComment)
        assert article.comments[0].comment == "<p>Дякую за статтю!</p>"
        assert article.content == {"time": 1683367200000, "blocks": [{"type": "paragraph"}]}
        assert article.tags[0].default is False

    def test_is_liked_counter_becomes_flag(self, payloads):
        """Test a positive like counter reads as liked."""
        payload = payloads.full_article()
        payload["isLiked"] = 3
        assert decode(FullArticle, payload).is_liked is True

    @pytest.mark.parametrize("value", [True, -1, "1", 1.5])
    def test_is_liked_rejects_non_counters(self, payloads, value):
        """Test isLiked accepts only non-negative integers."""
        payload = payloads.full_article()
        payload["isLiked"] = value
        with pytest.raises(DeserializationError) as excinfo:
            decode(FullArticle, payload)
        assert excinfo.value.issue.name == "isLiked"

    def test_socials_keep_malformed_links(self, payloads):
        """Test a broken social link does not fail decoding."""
        user = decode(RecommendedArticle, payloads.recommended_article()).owner
        assert user.socials["telegram"].is_valid
        assert not user.socials["facebook"].is_valid
        assert user.donate_url is not None

    def test_full_user_relations(self, payloads):
        """Test profile page decodes tags and articles."""
        user = decode(FullUser, payloads.full_user())
        assert user.description is None
        assert len(user.articles) == 2
        assert isinstance(user.articles[0], AuthorArticle)
        assert isinstance(user.author_tags[0], UserTag)

    def test_full_tag_articles(self, payloads):
        """Test tag page decodes its articles."""
        tag = decode(FullTag, payloads.full_tag())
        assert tag.mentions_num == 57
        assert all(isinstance(article, TagArticle) for article in tag.articles)

    def test_reply_links(self, payloads):
        """Test replies reference their parent and root comments."""
        reply = decode(ReplyComment, payloads.reply_comment())
        assert str(reply.reply_to_comment) == f"{4000:024x}"
        assert reply.root_comment_owner == UserId(f"{2000:024x}")
        assert reply.version == 0

    def test_naive_timestamp_rejected(self, payloads):
        """Test timestamps must carry an offset."""
        payload = {**payloads.article_tag(), "createdAt": "2023-05-06T10:00:00"}
        with pytest.raises(DeserializationError) as excinfo:
            decode(ArticleTag, payload)
        assert excinfo.value.issue == TypeMismatch("createdAt", "ISO-8601 datetime string", "string")


class TestOptionalKeys:
    """Test which keys may be absent."""

    def test_avatar_and_socials_may_be_absent(self, payloads):
        """Test avatar, socials and donateUrl default when omitted."""
        payload = payloads.article_user()
        del payload["avatar"], payload["socials"], payload["donateUrl"]
        article = payloads.recommended_article()
        article["owner"] = payload

        owner = decode(RecommendedArticle, article).owner

        assert owner.avatar is None
        assert owner.socials == {}
        assert owner.donate_url is None

    def test_follower_identity_may_be_absent(self, payloads):
        """Test deleted followers decode without id, username and name."""
        payload = payloads.follower()
        del payload["_id"], payload["username"], payload["name"]
        follower = decode(FollowerUser, payload)
        assert follower.id is None
        assert follower.username is None

    def test_tag_flags_may_be_absent(self, payloads):
        """Test default, ignore and general are optional on article tags."""
        payload = {**payloads.article_tag(), "default": True, "general": False}
        tag = decode(ArticleTag, payload)
        assert tag.default is True
        assert tag.ignore is False
        assert tag.general is False

    def test_pin_created_at_may_be_absent(self, payloads):
        """Test pinCreatedAt is optional and parsed when present."""
        assert decode(SearchArticle, payloads.search_article()).pin_created_at is None
        payload = {**payloads.search_article(), "pinCreatedAt": "2024-01-01T00:00:00Z"}
        assert decode(SearchArticle, payload).pin_created_at.year == 2024

    def test_nullable_key_still_required(self, payloads):
        """Test a nullable field must be present."""
        payload = payloads.full_user()
        del payload["description"]
        with pytest.raises(DeserializationError) as excinfo:
            decode(FullUser, payload)
        assert excinfo.value.issues == [MissingField("description")]

    def test_comment_owner_may_be_null(self, payloads):
        """Test top-level comments of deleted accounts have no owner."""
        payload = {**payloads.article_comment(), "owner": None}
        assert decode(ArticleComment, payload).owner is None


class TestAge:
    """Test fetch timestamps."""

    def test_age_grows_from_zero(self, payloads):
        """Test age() is the time since decoding."""
        before = datetime.now(UTC)
        tag = decode(PopularTag, payloads.popular_tag())
        assert before <= tag.fetched_at <= datetime.now(UTC)
        assert timedelta(0) <= tag.age() < timedelta(seconds=5)
