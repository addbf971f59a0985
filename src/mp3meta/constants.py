# Frame identifiers follow the ID3v2.3 naming. Tags are always translated
# to the v2.3 frame set on load (TDRC -> TYER/TDAT), so one table serves both.

# Plain text fields, copied verbatim
TEXT_FRAMES = {
    "artist": "TPE1",
    "album": "TALB",
    "album_artist": "TPE2",
    "title": "TIT2",
    "subtitle": "TIT3",
    "genre": "TCON",
    "composer": "TCOM",
    "lyricist": "TEXT",
    "publisher": "TPUB",
    "encoder": "TENC",
    "copyright": "TCOP",
    "language": "TLAN",
    "isrc": "TSRC",
    "date": "TDAT",
    "length": "TLEN",
}

# Text frames holding a single integer
NUMERIC_FRAMES = {
    "year": "TYER",
    "bpm": "TBPM",
}

# Frames holding "number/total", split into two integer fields
# (number field, total field) -> frame
NUMBER_PAIR_FRAMES = {
    ("disc_number", "disc_total"): "TPOS",
    ("track_number", "track_total"): "TRCK",
}

NUMBER_PAIR_SEPARATOR = "/"

# Separator used when a text frame carries several values
MULTI_VALUE_SEPARATOR = "/"

PICTURE_FRAME = "APIC"

# APIC picture type 3
PICTURE_TYPE_FRONT_COVER = 3

PICTURE_MIME_TYPES = {
    "PNG": "image/png",
    "JPEG": "image/jpeg",
}

# mutagen's v1 argument to ID3.save()
ID3V1_MODES = {
    "remove": 0,
    "keep": 1,
    "create": 2,
}

SUPPORTED_ID3_VERSIONS = (3, 4)
