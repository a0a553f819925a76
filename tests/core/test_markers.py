"""Tests for footmark.core.markers."""

from footmark.core.markers import (
    content_label,
    format_content,
    format_reference,
    is_content_line,
    next_footnote_number,
    reference_at,
    scan_markers,
)


class TestScanMarkers:
    """Tests for scan_markers()."""

    def test_references_and_content_in_reading_order(self):
        scan = scan_markers(["Hello[^1] and[^2]", "", "[^1]: one", "[^2]: two"])

        assert [(r.row, r.start_col, r.end_col, r.label) for r in scan.references] == [
            (1, 5, 9, 1),
            (1, 13, 17, 2),
        ]
        assert [(c.row, c.label) for c in scan.contents] == [(3, 1), (4, 2)]

    def test_content_line_body_is_not_scanned(self):
        scan = scan_markers(["x[^1]", "[^1]: see also [^2]"])

        assert len(scan.references) == 1
        assert scan.contents[0].label == 1

    def test_indented_definition_is_a_reference_line(self):
        scan = scan_markers([" [^1]: not a definition"])

        assert scan.contents == []
        assert scan.references[0].start_col == 1

    def test_multiple_references_share_a_label(self):
        scan = scan_markers(["a[^3] b[^3]", "c[^3]"])

        assert [r.label for r in scan.references] == [3, 3, 3]
        assert [r.row for r in scan.references] == [1, 1, 2]

    def test_leading_zero_label(self):
        scan = scan_markers(["x[^007]"])
        ref = scan.references[0]

        assert ref.label == 7
        assert ref.digits_span == (3, 6)

    def test_live_references_skip_tombstones(self):
        scan = scan_markers(["a[^1] b[^2]"])
        scan.references[0].deleted = True

        assert [index for index, _ in scan.live_references()] == [1]

    def test_has_content(self):
        scan = scan_markers(["a[^1]", "[^1]: x"])

        assert scan.has_content(1)
        assert not scan.has_content(2)


class TestMarkerHelpers:
    """Tests for single-line marker helpers."""

    def test_content_label(self):
        assert content_label("[^12]: text") == 12
        assert content_label("[^12] text") is None
        assert is_content_line("[^3]:")
        assert not is_content_line("text [^3]:")

    def test_reference_at(self):
        line = "ab[^12]cd"

        assert reference_at(line, 2) == (2, 7, 12)
        assert reference_at(line, 6) == (2, 7, 12)
        assert reference_at(line, 7) is None
        assert reference_at(line, 1) is None

    def test_next_footnote_number_defaults_to_one(self):
        assert next_footnote_number([]) == 1
        assert next_footnote_number(["no footnotes here"]) == 1

    def test_next_footnote_number_uses_highest_label(self):
        assert next_footnote_number(["x[^3] y[^1]", "", "[^7]: seven"]) == 8

    def test_formatting(self):
        assert format_reference(4) == "[^4]"
        assert format_content(4) == "[^4]: "
