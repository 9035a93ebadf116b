"""Known sensor node ids and their mounting positions."""

from __future__ import annotations

from typing import Dict

NODE_TITLE_MAP: Dict[int, str] = {
    8000001: "Engine Mount Front Top LH",
    8000002: "Engine Mount Front Top RH",
    8000003: "Engine Mount Front Bottom LH",
    8000004: "Engine Mount Front Bottom RH",
    8000005: "Engine Mount Rear Top LH",
    8000006: "Engine Mount Rear Top RH",
    8000007: "Engine Mount Rear Bottom LH",
    8000008: "Engine Mount Rear Bottom RH",
    8000013: "Swingarn bracket LH Top",
    8000014: "Swingarn bracket RH Top",
    8000015: "Swingarn bracket LH Bottom",
    8000016: "Swingarn bracket RH Bottom",
}

DEFAULT_START_NODE = 8000001
DEFAULT_END_NODE = 8000045


def node_title(node_id: int) -> str:
    return NODE_TITLE_MAP.get(int(node_id), f"Node {int(node_id)}")
