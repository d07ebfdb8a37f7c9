"""Tests for word wrapping and pagination of plain text."""
import pytest

from doc_tailor.document_builder import (
    FontManager,
    FontVariant,
    Page,
    PageGeometry,
    PaginatedRenderer,
    TextRun,
    render_pages,
)
from doc_tailor.exceptions import InvalidConfigurationError, MeasurementError

NARROW = PageGeometry(width=120, height=200, margin=10)  # 100 units of content width
SHORT = PageGeometry(width=1000, height=100, margin=10)  # 5 body lines per page


def _all_runs(pages):
    return [run for page in pages for run in page.runs]


def test_heading_and_body_on_one_page(measurer):
    geometry = PageGeometry()
    pages = render_pages("Summary:\nBuilt scalable systems.", measurer, geometry)

    assert len(pages) == 1
    first, second = pages[0].runs
    assert first == TextRun("Summary:", 50, pytest.approx(geometry.height - 50), FontVariant.BOLD, 13)
    assert second.text == "Built scalable systems."
    assert second.font_variant is FontVariant.REGULAR
    assert second.size_pt == 11
    assert second.y == pytest.approx(geometry.height - 50 - 16.5)


def test_empty_text_renders_one_empty_page(measurer):
    pages = render_pages("", measurer)

    assert pages == [Page(width=PageGeometry().width, height=PageGeometry().height, runs=[])]


def test_blank_only_text_renders_one_empty_page(measurer):
    pages = render_pages("   \n\n\t\n", measurer, SHORT)

    assert len(pages) == 1
    assert pages[0].runs == []


def test_long_line_wraps_into_three_runs(measurer):
    line = " ".join(["abcdefghi"] * 30)
    assert measurer.width_of(line, FontVariant.REGULAR, 11) >= 2.9 * NARROW.content_width

    pages = render_pages(line, measurer, NARROW)

    assert len(pages) == 1
    runs = pages[0].runs
    assert [run.text for run in runs] == [" ".join(["abcdefghi"] * 10)] * 3
    assert [run.y for run in runs] == pytest.approx([190, 173.5, 157])
    assert all(run.x == NARROW.margin for run in runs)
    for run in runs:
        assert run.x + measurer.width_of(run.text, run.font_variant, run.size_pt) <= NARROW.width - NARROW.margin


def test_overflow_starts_new_page_at_top(measurer):
    lines = [f"body line number {i}" for i in range(8)]

    pages = render_pages("\n".join(lines), measurer, SHORT)

    assert len(pages) == 2
    assert [run.text for run in pages[0].runs] == lines[:5]
    first_on_new_page = pages[1].runs[0]
    assert first_on_new_page.text == "body line number 5"
    assert first_on_new_page.y == pytest.approx(SHORT.height - SHORT.margin)


def test_wrapped_line_continues_on_next_page(measurer):
    geometry = PageGeometry(width=120, height=60, margin=10)
    line = " ".join(["abcdefghi"] * 40)

    pages = render_pages(line, measurer, geometry)

    assert len(pages) == 2
    assert len(pages[0].runs) == 3
    assert len(pages[1].runs) == 1
    assert pages[1].runs[0].y == pytest.approx(geometry.top)


def test_blank_line_adds_half_line_spacer(measurer):
    geometry = PageGeometry()
    pages = render_pages("first line here\n\nsecond line here", measurer, geometry)

    first, second = pages[0].runs
    assert first.y - second.y == pytest.approx(16.5 + 8.25)


def test_spacers_never_break_pages_by_themselves(measurer):
    lines = [f"body line number {i}" for i in range(5)] + [""] * 10

    pages = render_pages("\n".join(lines), measurer, SHORT)

    assert len(pages) == 1


def test_text_after_spacer_underflow_starts_new_page(measurer):
    lines = [f"body line number {i}" for i in range(4)] + [""] * 3 + ["closing remarks follow"]

    pages = render_pages("\n".join(lines), measurer, SHORT)

    # 90, 73.5, 57, 40.5 -> 24 - 3 * 8.25 = -0.75 < margin
    assert len(pages) == 2
    assert pages[1].runs == [
        TextRun("closing remarks follow", 10, pytest.approx(90), FontVariant.REGULAR, 11)
    ]


def test_overlong_word_is_kept_whole(measurer):
    long_word = "x" * 150
    pages = render_pages(f"short {long_word} tail", measurer, NARROW)

    assert [run.text for run in pages[0].runs] == ["short", long_word, "tail"]


def test_single_overlong_word_line(measurer):
    long_word = "y" * 300
    pages = render_pages(long_word, measurer, NARROW)

    assert [run.text for run in pages[0].runs] == [long_word]


def test_heading_runs_are_bold_and_larger(measurer):
    geometry = PageGeometry(width=30, height=200, margin=10)  # 10 units of content width

    pages = render_pages("Work Experience", measurer, geometry)

    runs = pages[0].runs
    assert [run.text for run in runs] == ["Work", "Experience"]
    assert all(run.font_variant is FontVariant.BOLD and run.size_pt == 13 for run in runs)
    assert all(variant is FontVariant.BOLD and size == 13 for _, variant, size in measurer.calls)


def test_every_non_blank_line_produces_runs(measurer):
    text = "Jane Doe\n\nSummary:\nEngineer.\n\nSKILLS\nPython, Go, SQL\n"

    runs = _all_runs(render_pages(text, measurer, NARROW))

    non_blank = [line for line in text.split("\n") if line.strip()]
    assert len(runs) >= len(non_blank)


def test_runs_reconstruct_original_words(measurer):
    text = (
        "PROFILE\n"
        "Backend engineer focused on reliability, observability and clean interfaces between services.\n"
        "\n"
        "Experience:\n"
        "Designed a billing pipeline processing millions of events per day with strict ordering guarantees.\n"
        "Mentored four junior engineers through their first production launches."
    )

    runs = _all_runs(render_pages(text, measurer, NARROW))

    assert " ".join(run.text for run in runs).split() == text.split()


def test_wrapped_runs_stay_within_content_width(measurer):
    text = "\n".join(
        "word " * n + "end" for n in range(1, 60, 7)
    )

    runs = _all_runs(render_pages(text, measurer, NARROW))

    for run in runs:
        right_edge = run.x + measurer.width_of(run.text, run.font_variant, run.size_pt)
        assert right_edge <= NARROW.width - NARROW.margin


def test_rendering_is_idempotent(measurer):
    text = "SUMMARY\n\n" + "\n".join(f"achievement number {i} delivered on time" for i in range(30))
    renderer = PaginatedRenderer()

    first = renderer.render(text, measurer, SHORT)
    second = renderer.render(text, measurer, SHORT)

    assert first == second
    assert render_pages(text, measurer, SHORT) == first


def test_pages_have_geometry_size(measurer):
    pages = render_pages("\n".join(f"body line number {i}" for i in range(12)), measurer, SHORT)

    assert len(pages) == 3
    assert all((page.width, page.height) == (1000, 100) for page in pages)
    assert all(page.runs for page in pages)


def test_custom_font_size(measurer):
    pages = render_pages("Summary:\nplain body text", measurer, PageGeometry(), font_size=10)

    heading, body = pages[0].runs
    assert heading.size_pt == 12
    assert body.size_pt == 10
    assert heading.y - body.y == pytest.approx(15)


def test_measurement_errors_propagate():
    class FailingMeasurer:
        def width_of(self, text, font_variant, size_pt):
            raise MeasurementError(text, "Times-Roman", "unsupported character")

    with pytest.raises(MeasurementError):
        render_pages("some text", FailingMeasurer())


@pytest.mark.parametrize("kwargs", [
    {"width": 0},
    {"height": -1},
    {"margin": -5},
    {"width": 100, "margin": 50},
    {"height": 80, "margin": 40},
])
def test_invalid_geometry(kwargs):
    with pytest.raises(InvalidConfigurationError):
        PageGeometry(**kwargs)


def test_geometry_content_box():
    geometry = PageGeometry(width=600, height=800, margin=50)

    assert geometry.content_width == 500
    assert geometry.content_height == 700
    assert geometry.top == 750


def test_byte_order_mark_line_is_a_spacer():
    pages = render_pages("\ufeff\nSummary:", FontManager())

    (run,) = pages[0].runs
    assert run.text == "Summary:"
    assert run.y == pytest.approx(PageGeometry().top - 16.5 / 2)
