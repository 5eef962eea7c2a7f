from app.formatter import format_report
from app.prompts import DEFAULT_ANALYSIS
from app.schemas import BulletRow, Paragraph, PropertyRow, SectionHeader


def test_section_header_drops_number_marker():
    assert format_report("3. Formation & Geology") == [SectionHeader(text="Formation & Geology")]


def test_property_row():
    assert format_report("- Hardness: 7 on Mohs scale") == [
        PropertyRow(label="Hardness", value="7 on Mohs scale")
    ]


def test_bullet_row_without_colon():
    assert format_report("- Faceted, cabochon, beads") == [BulletRow(text="Faceted, cabochon, beads")]


def test_paragraph():
    assert format_report("This is for educational purposes only.") == [
        Paragraph(text="This is for educational purposes only.")
    ]


def test_only_first_colon_splits_label():
    assert format_report("- Time: 10:30") == [PropertyRow(label="Time", value="10:30")]
    assert format_report("- Ratio: 1:2:3") == [PropertyRow(label="Ratio", value="1:2:3")]


def test_markup_characters_are_stripped():
    blocks = format_report("**2. Physical _Properties_**\n- `Luster`: *Vitreous*\n## Notes")
    assert blocks == [
        SectionHeader(text="Physical Properties"),
        PropertyRow(label="Luster", value="Vitreous"),
        Paragraph(text="Notes"),
    ]


def test_blank_and_markup_only_lines_produce_nothing():
    assert format_report("") == []
    assert format_report("\n   \n***\n# \n`` \n") == []


def test_order_is_preserved_without_gaps():
    text = "Intro line\n\n1. Identification\n\n- Name: Opal\n- Play of color\n\nClosing"
    assert format_report(text) == [
        Paragraph(text="Intro line"),
        SectionHeader(text="Identification"),
        PropertyRow(label="Name", value="Opal"),
        BulletRow(text="Play of color"),
        Paragraph(text="Closing"),
    ]


def test_windows_line_endings():
    assert format_report("1. A\r\n- B: c\r\n") == [
        SectionHeader(text="A"),
        PropertyRow(label="B", value="c"),
    ]


def test_number_without_period_is_not_a_header():
    assert format_report("2024 was a good year") == [Paragraph(text="2024 was a good year")]


def test_colon_without_dash_is_a_paragraph():
    assert format_report("Note: results vary") == [Paragraph(text="Note: results vary")]


def test_formatting_is_deterministic():
    assert format_report(DEFAULT_ANALYSIS) == format_report(DEFAULT_ANALYSIS)


def test_default_analysis_structure():
    blocks = format_report(DEFAULT_ANALYSIS)
    headers = [b.text for b in blocks if isinstance(b, SectionHeader)]
    assert headers == [
        "Gemstone Identification:",
        "Physical Properties:",
        "Formation & Geology:",
        "Value & Collection:",
        "Cultural & Metaphysical Aspects:",
    ]
    assert PropertyRow(label="Name", value="Amethyst") in blocks
    assert PropertyRow(label="Birthstone", value="February") in blocks
    assert all(not isinstance(b, Paragraph) for b in blocks)


def test_only_ascii_digits_start_a_section():
    assert format_report("١. Header") == [Paragraph(text="١. Header")]
    assert format_report("１. Header") == [Paragraph(text="１. Header")]


def test_byte_order_mark_is_trimmed():
    assert format_report("\ufeff1. Header") == [SectionHeader(text="Header")]
    assert format_report("- Name: Opal\ufeff") == [PropertyRow(label="Name", value="Opal")]
    assert format_report("\ufeff") == []
