from seogen.models import CreativeContext, SuggestedSection
from seogen.services.mock import mock_creative, mock_suggestions


def test_template_headlines_without_context():
    out = mock_suggestions("desc", "car loans", ["a", "b"])
    assert len(out.headlines) == 5
    assert out.headlines[0] == "The Ultimate car loans Guide to Getting the Best Deal"
    assert all("car loans" in h for h in out.headlines)
    assert out.keywords == ["a", "b"]


def test_hook_headlines_capped_at_five():
    ctx = CreativeContext(marketing_hooks=[f"hook {i}" for i in range(7)])
    out = mock_suggestions("desc", "loans", [], ctx)
    assert out.headlines == [f"loans hook {i}" for i in range(5)]


def test_keywords_from_sections_and_themes():
    ctx = CreativeContext(
        suggested_structure=[SuggestedSection(title="Cars With Warranty From Dealers", content="x")],
        key_themes=["financing", "warranty"],
    )
    out = mock_suggestions("desc", "kw", ["financing", "deals"], ctx)
    # short words and stop words dropped, duplicates removed
    assert out.keywords == ["financing", "deals", "cars", "warranty", "dealers"]


def test_keywords_capped():
    related = [f"k{i}" for i in range(20)]
    ctx = CreativeContext(key_themes=[f"t{i}" for i in range(20)])
    out = mock_suggestions("desc", "kw", related, ctx)
    assert len(out.keywords) == 15
    assert out.keywords[:8] == related[:8]
    assert out.keywords[8] == "t0"


def test_mock_creative_shape():
    creative = mock_creative()
    assert creative.business_vertical == "Automotive / Used Car Sales"
    assert len(creative.suggested_structure) == 4
    assert creative.target_keywords.primary == "buy car now pay later"
