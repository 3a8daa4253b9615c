"""Tests for the classifier component."""

import pytest

from gerbersort.classifier import (
    BoardFileType,
    BoardLayer,
    BoardSide,
    ClassificationResult,
    LayerAssignment,
    LayerClassifier,
    board_file_type,
    classify_file,
    determine_side_and_layer,
    get_file_ext,
    get_file_name,
    is_banned_extension,
)
from gerbersort.config.models import ClassifierSettings

UNKNOWN = LayerAssignment(BoardSide.UNKNOWN, BoardLayer.UNKNOWN)

ODD_NAMES = [
    "",
    ".",
    "..",
    "noextension",
    "trailingdot.",
    "a/b/c",
    "dir.v2/readme",
    "платa.gtl",
    "board 🙂.gbr",
    "C:\\gerbers\\top.gbr",
    "x" * 5000,
]


class TestGetFileExt:
    """Tests for get_file_ext."""

    def test_returns_text_after_last_dot(self):
        """Test extension is the text after the final dot."""
        assert get_file_ext("board.top.gbr") == "gbr"

    def test_preserves_case(self):
        """Test that the extension keeps its original case."""
        assert get_file_ext("path/to/file.GTL") == "GTL"

    @pytest.mark.parametrize("name", ["Makefile", "gerbers/README", ""])
    def test_no_dot_returns_empty(self, name):
        """Test names without a dot have an empty extension."""
        assert get_file_ext(name) == ""

    def test_trailing_dot(self):
        """Test a trailing dot gives an empty extension."""
        assert get_file_ext("board.") == ""

    @pytest.mark.parametrize("prefix", ["", "gerbers/", "a.b/c.d/", "/abs/path.v1/"])
    def test_unaffected_by_path_prefix(self, prefix):
        """Test extension of the bare file name ignores any directory prefix."""
        for name in ["board.GTL", "Makefile", "x.tar.gz"]:
            assert get_file_ext(get_file_name(prefix + name)) == get_file_ext(name)


class TestGetFileName:
    """Tests for get_file_name."""

    def test_strips_directories(self):
        """Test last path component is returned."""
        assert get_file_name("a/b/c.txt") == "c.txt"

    def test_no_slash_returns_input(self):
        """Test input without a slash is returned unchanged."""
        assert get_file_name("c.txt") == "c.txt"

    def test_backslash_not_a_separator(self):
        """Test Windows separators are not treated as path separators."""
        assert get_file_name("dir\\c.txt") == "dir\\c.txt"

    def test_trailing_slash(self):
        """Test a trailing slash yields an empty name."""
        assert get_file_name("gerbers/") == ""


class TestBoardFileType:
    """Tests for content-based format detection."""

    def test_gerber(self):
        """Test the format specification marker identifies Gerber."""
        assert board_file_type("G04 comment*\n%FSLAX26Y26*%\n") == BoardFileType.GERBER

    def test_drill(self):
        """Test the Excellon header identifies a drill file."""
        assert board_file_type("M48\nT01C0.0100\n%\n") == BoardFileType.DRILL

    def test_gerber_wins_over_drill(self):
        """Test Gerber is reported when both markers are present."""
        assert board_file_type("M48\n%FSLAX24Y24*%\n") == BoardFileType.GERBER

    @pytest.mark.parametrize("content", ["", "hello world", "%fslax26y26*%", "m48", "% FS"])
    def test_unsupported(self, content):
        """Test content without exact markers is unsupported."""
        assert board_file_type(content) == BoardFileType.UNSUPPORTED

    def test_marker_anywhere(self):
        """Test markers are found anywhere in the content."""
        assert board_file_type("x" * 1000 + "M48") == BoardFileType.DRILL


class TestDetermineSideAndLayer:
    """Tests for determine_side_and_layer."""

    @pytest.mark.parametrize(
        "name,side,layer",
        [
            ("board.gtl", BoardSide.TOP, BoardLayer.COPPER),
            ("board.gbs", BoardSide.BOTTOM, BoardLayer.SOLDER_MASK),
            ("design-F_Cu.gbr", BoardSide.TOP, BoardLayer.COPPER),
            ("myfile.drl", BoardSide.BOTH, BoardLayer.DRILL),
            ("BOARD.GTO", BoardSide.TOP, BoardLayer.SILK),
            ("gerbers/board.GBP", BoardSide.BOTTOM, BoardLayer.PASTE),
            ("project.gm3", BoardSide.BOTH, BoardLayer.MECHANICAL),
            ("project.gml", BoardSide.BOTH, BoardLayer.MILL),
            ("project.gko", BoardSide.BOTH, BoardLayer.OUTLINE),
            ("project.G2", BoardSide.INTERNAL, BoardLayer.COPPER),
            ("project.adtop", BoardSide.TOP, BoardLayer.ASSEMBLY),
            ("project.notes", BoardSide.BOTH, BoardLayer.NOTES),
            ("board.DRILL_TOP_BOTTOM", BoardSide.BOTH, BoardLayer.DRILL),
        ],
    )
    def test_known_names(self, name, side, layer):
        """Test common fabrication file names."""
        assert determine_side_and_layer(name) == LayerAssignment(side, layer)

    @pytest.mark.parametrize("name", ["random.xyz", "Makefile", "top", "board.gm21", ""])
    def test_unknown_names(self, name):
        """Test unrecognized names degrade to unknown."""
        assert determine_side_and_layer(name) == UNKNOWN

    def test_descriptor_rescues_unknown_extension(self):
        """Test descriptor fragments classify names with unlisted extensions."""
        assert determine_side_and_layer("Project.TopLayer") == LayerAssignment(
            BoardSide.TOP, BoardLayer.COPPER
        )
        assert determine_side_and_layer("Project.BoardOutline") == LayerAssignment(
            BoardSide.BOTH, BoardLayer.OUTLINE
        )

    @pytest.mark.parametrize("name", ODD_NAMES)
    def test_total_on_odd_input(self, name):
        """Test classification never raises and always returns an assignment."""
        result = determine_side_and_layer(name)
        assert isinstance(result, LayerAssignment)

    @pytest.mark.parametrize("name", ["design-B_Silks.gbr", "top.gbr", "mystery.gbr", "x.gtl"])
    def test_repeatable(self, name):
        """Test the same name always yields the same assignment."""
        assert determine_side_and_layer(name) == determine_side_and_layer(name)


class TestIsBannedExtension:
    """Tests for the denylist helper."""

    @pytest.mark.parametrize("ext", ["py", "PNG", ".pdf", "kicad_pcb", "s#3", "gitignore"])
    def test_banned(self, ext):
        """Test denylisted extensions are rejected regardless of case or dot."""
        assert is_banned_extension(ext)

    @pytest.mark.parametrize("ext", ["gtl", "gbr", "drl", "txt", ""])
    def test_not_banned(self, ext):
        """Test fabrication extensions pass the denylist."""
        assert not is_banned_extension(ext)


class TestClassificationResult:
    """Tests for ClassificationResult."""

    def test_status_banned(self):
        """Test banned files report banned status."""
        result = ClassificationResult(file_name="a.py", extension="py", banned=True)
        assert result.status == "banned"
        assert not result.is_recognized

    def test_status_unknown(self):
        """Test unresolved files report unknown status."""
        result = ClassificationResult(file_name="a.xyz", extension="xyz")
        assert result.status == "unknown"
        assert result.side == BoardSide.UNKNOWN

    def test_status_unsupported(self):
        """Test a known layer with unrecognized content is unsupported."""
        result = ClassificationResult(
            file_name="a.gtl",
            extension="gtl",
            assignment=LayerAssignment(BoardSide.TOP, BoardLayer.COPPER),
            file_type=BoardFileType.UNSUPPORTED,
        )
        assert result.status == "unsupported"
        assert not result.is_recognized

    def test_to_dict(self):
        """Test serialization to a plain dict."""
        result = ClassificationResult(
            file_name="a.drl",
            extension="drl",
            assignment=LayerAssignment(BoardSide.BOTH, BoardLayer.DRILL),
            file_type=BoardFileType.DRILL,
        )
        assert result.to_dict() == {
            "file_name": "a.drl",
            "extension": "drl",
            "side": "both",
            "layer": "drill",
            "file_type": "drill",
            "banned": False,
            "status": "classified",
        }


class TestLayerClassifier:
    """Tests for LayerClassifier."""

    @pytest.fixture
    def classifier(self):
        """Create a LayerClassifier instance."""
        return LayerClassifier()

    def test_initialization_with_defaults(self, classifier):
        """Test classifier initializes with default settings."""
        assert classifier.settings.assembly_keywords_case_sensitive is True
        assert len(classifier.stages) == 5

    def test_classify_name_only(self, classifier):
        """Test classifying without content leaves the file type empty."""
        result = classifier.classify("gerbers/board.GTL")
        assert result.extension == "GTL"
        assert result.assignment == LayerAssignment(BoardSide.TOP, BoardLayer.COPPER)
        assert result.file_type is None
        assert result.status == "classified"

    def test_classify_with_content(self, classifier):
        """Test content confirms the format."""
        result = classifier.classify("board.drl", "M48\nT1C0.8\n%\n")
        assert result.file_type == BoardFileType.DRILL
        assert result.is_recognized

    def test_classify_unsupported_content(self, classifier):
        """Test a recognized name with foreign content."""
        result = classifier.classify("board.gtl", "just some text")
        assert result.status == "unsupported"

    def test_classify_banned(self, classifier):
        """Test denylisted files are not classified."""
        result = classifier.classify("docs/readme.MD", "%FS")
        assert result.banned
        assert result.assignment == UNKNOWN
        assert result.file_type is None

    def test_xln_is_banned_before_classification(self, classifier):
        """Test xln is in the denylist even though its name maps to drill."""
        assert classifier.determine_side_and_layer("board.xln").layer == BoardLayer.DRILL
        assert classifier.classify("board.xln").banned

    def test_extra_banned_extensions(self):
        """Test host supplied extensions extend the denylist."""
        classifier = LayerClassifier(ClassifierSettings(extra_banned_extensions=[".GBR"]))
        assert classifier.classify("top.gbr").banned
        assert not classifier.classify("top.gtl").banned

    def test_assembly_keywords_case_insensitive(self):
        """Test the assembly keyword switch."""
        strict = LayerClassifier()
        relaxed = LayerClassifier(ClassifierSettings(assembly_keywords_case_sensitive=False))

        assert strict.determine_side_and_layer("top_assy.gbr") == LayerAssignment(
            BoardSide.TOP, BoardLayer.COPPER
        )
        assert relaxed.determine_side_and_layer("top_assy.gbr") == LayerAssignment(
            BoardSide.TOP, BoardLayer.ASSEMBLY
        )

    def test_classify_multiple(self, classifier):
        """Test classifying several files at once."""
        results = classifier.classify_multiple(
            [("a.gtl", "%FSLAX26Y26*%"), ("b.png", None), ("c.xyz", "")]
        )
        assert [r.status for r in results] == ["classified", "banned", "unknown"]

    def test_classify_file_helper(self):
        """Test the module level helper uses default settings."""
        result = classify_file("board.gbl", "%FSLAX26Y26*%")
        assert result.assignment == LayerAssignment(BoardSide.BOTTOM, BoardLayer.COPPER)
        assert result.file_type == BoardFileType.GERBER
