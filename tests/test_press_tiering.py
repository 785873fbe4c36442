from datetime import datetime, timedelta

import pytest

from transparence.models.press import ArticleTier, PressArticle
from transparence.services.press_tiering import (
    analysis_model_for,
    classify_article_tier,
    find_judicial_keyword,
    prioritize_articles,
)
from transparence.utils.press_keywords import (
    JUDICIAL_KEYWORDS,
    JURISDICTION_KEYWORDS,
    OFFENSE_KEYWORDS,
    PROCEDURAL_KEYWORDS,
)

HIGH = ArticleTier.HIGH_PRECISION
LOW = ArticleTier.LOW_PRECISION


def test_keyword_lists_are_normalised_and_non_empty() -> None:
    assert len(JUDICIAL_KEYWORDS) > 30
    assert PROCEDURAL_KEYWORDS and OFFENSE_KEYWORDS and JURISDICTION_KEYWORDS
    for keyword in JUDICIAL_KEYWORDS:
        assert keyword == keyword.lower().strip()
        assert keyword.isascii()


def test_tier_labels() -> None:
    assert HIGH.value == "high-precision"
    assert LOW.value == "low-precision"


@pytest.mark.parametrize(
    "title, description",
    [
        ("Politicien X mis en examen", None),
        ("Tribunal de Paris", "L'ancien maire condamné à 2 ans"),
        ("Affaire de corruption au conseil régional", None),
        ("Renvoi devant le tribunal correctionnel", None),
        ("Garde à vue pour le sénateur", None),
        ("Perquisition au siège du parti", None),
        ("Accusé de viol par son assistante", None),
        ("Le procès de l'ancien ministre débute", None),
        ("Le parquet national financier ouvre une enquête", None),
    ],
)
def test_judicial_articles_are_high_precision(title, description) -> None:
    assert classify_article_tier(title, description) == HIGH


@pytest.mark.parametrize(
    "title",
    [
        "Violation des droits de l'homme",
        "Le processus législatif continue",
        "Sans préjugé de la décision finale",
        "Moment de relaxation au Sénat",
    ],
)
def test_single_word_keywords_do_not_match_inside_longer_words(title) -> None:
    assert classify_article_tier(title, None) == LOW


def test_standalone_single_word_keywords_match_with_punctuation_boundaries() -> None:
    assert classify_article_tier("Viol : l'élu visé par une plainte", None) == HIGH
    assert classify_article_tier("«Relaxe» requise pour le maire", None) == HIGH
    assert classify_article_tier("juge", None) == HIGH


def test_matching_is_case_insensitive() -> None:
    upper = classify_article_tier("MISE EN EXAMEN de l'ancien ministre", None)
    lower = classify_article_tier("mise en examen de l'ancien ministre", None)
    assert upper == lower == HIGH


def test_matching_is_accent_insensitive() -> None:
    assert classify_article_tier("Le depute condamne pour fraude", None) == HIGH
    assert classify_article_tier("Détournement de fonds publics", None) == HIGH
    assert classify_article_tier("Detournement de fonds publics", None) == HIGH


def test_whitespace_is_collapsed_before_phrase_matching() -> None:
    assert classify_article_tier("Placé en garde\n à   vue", None) == HIGH


def test_keyword_in_description_only() -> None:
    assert classify_article_tier("Actualité politique", "Le tribunal correctionnel a tranché") == HIGH


def test_non_judicial_articles_are_low_precision() -> None:
    assert classify_article_tier("Macron en visite à Berlin", "Discussions sur le budget européen") == LOW
    assert classify_article_tier("Visite diplomatique", None) == LOW


def test_empty_and_absent_input_is_low_precision() -> None:
    assert classify_article_tier("", None) == LOW
    assert classify_article_tier(None, None) == LOW
    assert classify_article_tier("   ", "") == LOW


def test_find_judicial_keyword_returns_first_match() -> None:
    assert find_judicial_keyword("Politicien X mis en examen", None) == "mis en examen"
    assert find_judicial_keyword("Visite diplomatique", None) is None


def _make_article(article_id: int, title: str, published_at: datetime) -> PressArticle:
    return PressArticle(
        id=article_id,
        feed_source="lemonde",
        url=f"https://example.org/articles/{article_id}",
        title=title,
        published_at=published_at,
    )


def test_prioritize_articles_puts_high_precision_first_then_recent() -> None:
    now = datetime(2024, 6, 1, 12, 0)
    articles = [
        _make_article(1, "Visite diplomatique", now),
        _make_article(2, "Le maire condamné", now - timedelta(days=2)),
        _make_article(3, "Budget européen", now - timedelta(days=1)),
        _make_article(4, "Perquisition au ministère", now - timedelta(hours=1)),
    ]

    ordered = prioritize_articles(articles)

    assert [item.article.id for item in ordered] == [4, 2, 1, 3]
    assert [item.tier for item in ordered] == [HIGH, HIGH, LOW, LOW]
    assert ordered[0].matched_keyword == "perquisition"


def test_analysis_model_for_uses_configured_models() -> None:
    assert analysis_model_for(HIGH) != analysis_model_for(LOW)


@pytest.mark.parametrize(
    "title, keyword",
    [
        ("Trafic d’influence : l’ancien ministre visé", "trafic d'influence"),
        ("La cour d’appel de Paris confirme", "cour d'appel"),
        ("Prise illégale d’intérêts à la mairie", "prise illegale d'interets"),
        ("Renvoi devant la cour d‘assises", "renvoi devant"),
        ("Cour dʼassises de Paris", "cour d'assises"),
    ],
)
def test_typographic_apostrophes_match_phrase_keywords(title, keyword) -> None:
    assert classify_article_tier(title, None) == HIGH
    assert find_judicial_keyword(title, None) == keyword
