from typing import Any


class FakeDataSource:
    def __init__(self, document: dict[str, Any]) -> None:
        self._document = document

    @property
    def source_type(self) -> str:
        return "test"

    @property
    def source_detail(self) -> str:
        return "fake"

    def fetch(self) -> dict[str, Any]:
        return self._document


class ErrorDataSource:
    @property
    def source_type(self) -> str:
        return "test"

    @property
    def source_detail(self) -> str:
        return "error"

    def fetch(self) -> dict[str, Any]:
        raise RuntimeError("fetch failed")


def player_row(**overrides: Any) -> dict[str, Any]:
    return {"id": "p1", "name": "Casey Jones", "number": "12", "bats": "R", **overrides}


def outing_row(**overrides: Any) -> dict[str, Any]:
    return {
        "id": "o1",
        "playerId": "p1",
        "type": "batting_practice",
        "date": "2025-03-14",
        "atBats": [
            {
                "id": "ab1",
                "result": "single",
                "pitches": [
                    {"id": "pt1", "location": {"x": 0.2, "y": -0.1}, "outcome": "ball", "pitchType": "fastball"},
                    {"id": "pt2", "location": {"x": 0.0, "y": 0.3}, "outcome": "in_play_hit"},
                ],
                "sprayPoint": {
                    "id": "sp1",
                    "x": 0.1,
                    "y": 0.6,
                    "result": "single",
                    "hitType": "line_drive",
                    "exitVelocity": 84.5,
                    "isBarrel": False,
                },
            },
            {"id": "ab2", "result": "strikeout"},
        ],
        **overrides,
    }
