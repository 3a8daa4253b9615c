"""Lookup tables used to classify fabrication files by name.

All tables are built once at import time and exposed read-only. Keys are
lower-case; callers lower-case the text they look up.
"""

from types import MappingProxyType

from .models import BoardLayer, BoardSide, FileNameDescriptor, LayerAssignment

TOP_COPPER = LayerAssignment(BoardSide.TOP, BoardLayer.COPPER)
TOP_MASK = LayerAssignment(BoardSide.TOP, BoardLayer.SOLDER_MASK)
TOP_SILK = LayerAssignment(BoardSide.TOP, BoardLayer.SILK)
TOP_PASTE = LayerAssignment(BoardSide.TOP, BoardLayer.PASTE)
TOP_ASSEMBLY = LayerAssignment(BoardSide.TOP, BoardLayer.ASSEMBLY)

BOTTOM_COPPER = LayerAssignment(BoardSide.BOTTOM, BoardLayer.COPPER)
BOTTOM_MASK = LayerAssignment(BoardSide.BOTTOM, BoardLayer.SOLDER_MASK)
BOTTOM_SILK = LayerAssignment(BoardSide.BOTTOM, BoardLayer.SILK)
BOTTOM_PASTE = LayerAssignment(BoardSide.BOTTOM, BoardLayer.PASTE)
BOTTOM_ASSEMBLY = LayerAssignment(BoardSide.BOTTOM, BoardLayer.ASSEMBLY)

INNER_COPPER = LayerAssignment(BoardSide.INTERNAL, BoardLayer.COPPER)

OUTLINE = LayerAssignment(BoardSide.BOTH, BoardLayer.OUTLINE)
DRILL = LayerAssignment(BoardSide.BOTH, BoardLayer.DRILL)
MILL = LayerAssignment(BoardSide.BOTH, BoardLayer.MILL)
MECHANICAL = LayerAssignment(BoardSide.BOTH, BoardLayer.MECHANICAL)
NOTES = LayerAssignment(BoardSide.BOTH, BoardLayer.NOTES)


# Generic Gerber extensions; these carry no layer information on their own
GENERIC_EXTENSIONS = frozenset({"gbr", "grb", "ger", "art"})


_EXTENSIONS = {
    "gml": MILL,
    # Outline
    "fabrd": OUTLINE,
    "oln": OUTLINE,
    "gko": OUTLINE,
    "outline": OUTLINE,
    "gmb": OUTLINE,
    "gb3": OUTLINE,  # OSH Stencils bottom outline
    "gt3": OUTLINE,  # OSH Stencils top outline
    # Inner copper
    "l2": INNER_COPPER,
    "g2": INNER_COPPER,
    "gl1": INNER_COPPER,
    "g2l": INNER_COPPER,
    "l3": INNER_COPPER,
    "g3": INNER_COPPER,
    "gl2": INNER_COPPER,
    "g3l": INNER_COPPER,
    # Assembly drawings and notes
    "adtop": TOP_ASSEMBLY,
    "adbottom": BOTTOM_ASSEMBLY,
    "notes": NOTES,
    # Copper
    "l4": BOTTOM_COPPER,
    "gbl": BOTTOM_COPPER,
    "l2m": BOTTOM_COPPER,
    "bottom": BOTTOM_COPPER,
    "bot": BOTTOM_COPPER,
    "l1": TOP_COPPER,
    "l1m": TOP_COPPER,
    "gtl": TOP_COPPER,
    "top": TOP_COPPER,
    # Paste
    "gbp": BOTTOM_PASTE,
    "spbottom": BOTTOM_PASTE,
    "spb": BOTTOM_PASTE,
    "gpb": BOTTOM_PASTE,
    "gtp": TOP_PASTE,
    "sptop": TOP_PASTE,
    "spt": TOP_PASTE,
    "gpt": TOP_PASTE,
    # Silkscreen
    "gbo": BOTTOM_SILK,
    "ss2": BOTTOM_SILK,
    "ssbottom": BOTTOM_SILK,
    "bsk": BOTTOM_SILK,
    "ssb": BOTTOM_SILK,
    "gto": TOP_SILK,
    "ss1": TOP_SILK,
    "sstop": TOP_SILK,
    "slk": TOP_SILK,
    "sst": TOP_SILK,
    # Soldermask
    "gbs": BOTTOM_MASK,
    "sm2": BOTTOM_MASK,
    "smbottom": BOTTOM_MASK,
    "smb": BOTTOM_MASK,
    "gts": TOP_MASK,
    "sm1": TOP_MASK,
    "smtop": TOP_MASK,
    "smt": TOP_MASK,
    # Drill
    # Stored lower-case so the lower-cased extension can reach it
    "drill_top_bottom": DRILL,
    "drl": DRILL,
    "drill": DRILL,
    "drillnpt": DRILL,
    "xln": DRILL,
}

# Altium mechanical layers gm1..gm20
_EXTENSIONS.update({f"gm{n}": MECHANICAL for n in range(1, 21)})

EXTENSION_TABLE = MappingProxyType(_EXTENSIONS)


# Base names (text before the first dot) understood for generic extensions
BASE_NAME_TABLE = MappingProxyType(
    {
        "boardoutline": OUTLINE,
        "outline": OUTLINE,
        "board": OUTLINE,
        "bottom": BOTTOM_COPPER,
        "bottommask": BOTTOM_MASK,
        "bottompaste": BOTTOM_PASTE,
        "bottomsilk": BOTTOM_SILK,
        "top": TOP_COPPER,
        "topmask": TOP_MASK,
        "toppaste": TOP_PASTE,
        "topsilk": TOP_SILK,
        "inner1": INNER_COPPER,
        "inner2": INNER_COPPER,
    }
)


# KiCad (-f_cu, -edge_cuts, ...) and Eagle CAM (_tslk, _smc, ...) name
# markers, tested in this order
NAME_MARKERS: tuple[tuple[str, LayerAssignment], ...] = (
    ("outline", OUTLINE),
    ("-edge_cuts", OUTLINE),
    ("-b_cu", BOTTOM_COPPER),
    ("-f_cu", TOP_COPPER),
    ("-b_silks", BOTTOM_SILK),
    ("-f_silks", TOP_SILK),
    ("-b_mask", BOTTOM_MASK),
    ("-f_mask", TOP_MASK),
    ("-b_paste", BOTTOM_PASTE),
    ("-f_paste", TOP_PASTE),
    ("_fab", OUTLINE),
    ("_bslk", BOTTOM_SILK),
    ("_tslk", TOP_SILK),
    ("_smc", TOP_MASK),
    ("_sms", BOTTOM_MASK),
    ("_spc", TOP_PASTE),
    ("_sps", BOTTOM_PASTE),
) + tuple((f"_lyr{n}", INNER_COPPER) for n in range(1, 9))


# Last-resort fragments, scanned in order; first hit wins. ".bcream" is listed
# twice, so only its first entry is ever reached.
FILE_NAME_DESCRIPTORS: tuple[FileNameDescriptor, ...] = (
    FileNameDescriptor(".topsoldermask", TOP_MASK),
    FileNameDescriptor(".topsilkscreen", TOP_SILK),
    FileNameDescriptor(".toplayer", TOP_COPPER),
    FileNameDescriptor(".tcream", TOP_PASTE),
    FileNameDescriptor(".boardoutline", OUTLINE),
    FileNameDescriptor(".bcream", BOTTOM_MASK),
    FileNameDescriptor(".bottomsoldermask", BOTTOM_MASK),
    FileNameDescriptor(".bottomsilkscreen", BOTTOM_SILK),
    FileNameDescriptor(".bottomlayer", BOTTOM_COPPER),
    FileNameDescriptor(".bcream", BOTTOM_PASTE),
    FileNameDescriptor(".internalplane1", INNER_COPPER),
    FileNameDescriptor(".internalplane2", INNER_COPPER),
)


# Extensions that never hold fabrication data
BANNED_EXTENSIONS = frozenset(
    {
        # Source code and build output
        "c", "o", "s", "ld", "a", "so", "cc", "cpp", "cxx", "h", "hxx", "py",
        "js", "ino", "hex", "bin", "bat", "tcl", "sh", "exe", "dll", "lib",
        "map", "md5",
        # HDL and FPGA tooling
        "v", "vhdl", "vhd", "vhi", "sv", "do", "psm", "ucf", "ncf", "gise",
        "xise", "vho", "xco", "xdc", "bit", "xwbt", "key", "fmt", "sym",
        # CAD project and report files
        "dsn", "schdoc", "pcbdoc", "cmp", "lst", "mod", "dcm", "outputstatus",
        "apr_lib", "apr", "extrep", "rul", "rpt", "xln", "gpi", "kicad_pcb",
        "prjpcb", "project", "cproject", "net", "dri", "drr", "rep", "sch",
        "brd", "epf",
        "s#1", "s#2", "s#3", "s#4", "s#5", "s#6", "s#7", "s#8", "s#9",
        "b#1", "b#2", "b#3", "b#4", "b#5", "b#6", "b#7", "b#8", "b#9",
        # Documents, data and drawings
        "doc", "pdf", "md", "json", "csv", "xls", "xlsx", "dwg", "dxf",
        "html", "htm", "css", "info", "tool", "cfg", "ini",
        # Images and fonts
        "png", "jpg", "bmp", "gif", "xbm", "tif", "tiff", "ps", "svg", "ttf",
        # Archives and VCS metadata
        "zip", "gitignore", "gitattributes",
    }
)
