"""Tests for footmark.core.orphans."""

from footmark.core.markers import scan_markers
from footmark.core.orphans import resolve_orphan


class TestResolveOrphan:
    """Tests for resolve_orphan()."""

    def test_removes_every_reference_to_missing_label(self, make_document):
        doc = make_document("a[^7] b[^1] c[^7]", "", "[^1]: one")
        scan = scan_markers(doc.lines())

        assert resolve_orphan(doc, scan, 7) is True

        assert doc.line(1) == "a b[^1] c"
        assert scan.references[0].deleted
        assert scan.references[2].deleted
        assert not scan.references[1].deleted

    def test_surviving_reference_is_shifted(self, make_document):
        doc = make_document("a[^7] b[^1] c[^7]", "", "[^1]: one")
        scan = scan_markers(doc.lines())

        resolve_orphan(doc, scan, 7)

        ref = scan.references[1]
        assert (ref.start_col, ref.end_col) == (3, 7)
        assert doc.line(1)[ref.start_col : ref.end_col] == "[^1]"

    def test_label_with_content_is_kept(self, make_document):
        doc = make_document("a[^1]", "", "[^1]: one")
        scan = scan_markers(doc.lines())

        assert resolve_orphan(doc, scan, 1) is False
        assert doc.lines() == ["a[^1]", "", "[^1]: one"]
        assert not scan.references[0].deleted
