"""Sample natives shared by the test suite."""

from __future__ import annotations

from typing import Any

LABEL_HASH = "0xD49F9B0955C367DE"

SAMPLE_NATIVES: dict[str, Any] = {
    "NATIVE": {
        LABEL_HASH: {
            "name": "GET_LABEL_TEXT",
            "jhash": "0x7B5280EB",
            "comment": "Gets a string literal from a label name.",
            "params": [{"type": "const char*", "name": "labelName"}],
            "return_type": "const char*",
            "build": "323",
        }
    },
    "PLAYER": {
        "0x4f8644af03d0e0d6": {
            "name": "PLAYER_ID",
            "params": [],
            "return_type": "Player",
            "build": "323",
        },
        "0x6D0DE6A7B5DA71F8": {
            "name": "GET_PLAYER_NAME",
            "params": [{"type": "Player", "name": "player"}],
            "return_type": "const char*",
            "old_names": ["_GET_PLAYER_NAME", "GET_PLAYER_NAME_FROM_INDEX"],
        },
        "0x39FF19C64EF7DA5B": {
            "name": "SET_PLAYER_WANTED_LEVEL",
            "params": [
                {"type": "Player", "name": "player"},
                {"type": "int", "name": "wantedLevel"},
                {"type": "BOOL", "name": "disableNoMission"},
            ],
            "return_type": "void",
        },
    },
    "ENTITY": {
        "0x3FEF770D40960D5A": {
            "name": "GET_ENTITY_COORDS",
            "params": [
                {"type": "Entity", "name": "entity"},
                {"type": "BOOL", "name": "alive"},
            ],
            "return_type": "Vector3",
        }
    },
    "MISC": {
        "0xC906A7DAB05C8D2B": {
            "name": "GET_GROUND_Z_FOR_3D_COORD",
            "params": [
                {"type": "float", "name": "x"},
                {"type": "float", "name": "y"},
                {"type": "float", "name": "z"},
                {"type": "float*", "name": "groundZ"},
                {"type": "BOOL", "name": "ignoreWater"},
                {"type": "BOOL", "name": "p5"},
            ],
            "return_type": "BOOL",
        }
    },
}

# Natives of SAMPLE_NATIVES in export order
SAMPLE_ORDER = [
    "0xD49F9B0955C367DE",
    "0x4F8644AF03D0E0D6",
    "0x6D0DE6A7B5DA71F8",
    "0x39FF19C64EF7DA5B",
    "0x3FEF770D40960D5A",
    "0xC906A7DAB05C8D2B",
]
