"""Announce results returned by a NEM node.

The meaning of ``code`` depends on ``type``:

Validation (1), only 0 and 1 mean there was no failure:
    see VALIDATION_CODES.
HeartBeat (2):
    1: Successful heart beat detected.
Status (4):
    see STATUS_CODES.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union


class TypeNemAnnounceResult(IntEnum):
    Validation = 1
    HeartBeat = 2
    Status = 4


VALIDATION_CODES = {
    0: "Neutral result. The entity is neither new nor invalid (e.g. a transaction the node already knows).",
    1: "Success result. The entity is new and valid.",
    2: "Unknown failure. The validation failed for unknown reasons.",
    3: "The entity that was validated has already past its deadline.",
    4: "The entity used a deadline which lies too far in the future.",
    5: "There was an account involved which had an insufficient balance to perform the operation.",
    6: "The message supplied with the transaction is too large.",
    7: "The hash of the entity which got validated is already in the database.",
    8: "The signature of the entity could not be validated.",
    9: "The entity used a timestamp that lies too far in the past.",
    10: "The entity used a timestamp that lies in the future which is not acceptable.",
    11: "The entity is unusable.",
    12: "The score of the remote block chain is inferior (although a superior score was promised).",
    13: "The remote block chain failed validation.",
    14: "There was a conflicting importance transfer detected.",
    15: "There were too many transaction in the supplied block.",
    16: "The block contains a transaction that was signed by the harvester.",
    17: "A previous importance transaction conflicts with a new transaction.",
    18: "An importance transfer activation was attempted while previous one is active.",
    19: "An importance transfer deactivation was attempted but is not active.",
}

HEARTBEAT_CODES = {
    1: "Successful heart beat detected.",
}

STATUS_CODES = {
    0: "Unknown status.",
    1: "NIS is stopped.",
    2: "NIS is starting.",
    3: "NIS is running.",
    4: "NIS is booting the local node (implies NIS is running).",
    5: "The local node is booted (implies NIS is running).",
    6: "The local node is synchronized (implies NIS is running and the local node is booted).",
    7: "There is no remote node available (implies NIS is running and the local node is booted).",
    8: "NIS is currently loading the block chain.",
}

_CODE_TABLES = {
    TypeNemAnnounceResult.Validation: VALIDATION_CODES,
    TypeNemAnnounceResult.HeartBeat: HEARTBEAT_CODES,
    TypeNemAnnounceResult.Status: STATUS_CODES,
}


def describe_announce_result(result_type: int, code: int) -> Optional[str]:
    """Documented meaning of a type/code pair, or None if undocumented."""
    try:
        table = _CODE_TABLES[TypeNemAnnounceResult(result_type)]
    except ValueError:
        return None
    return table.get(code)


@dataclass(frozen=True)
class NemHash:
    data: str

    @classmethod
    def from_dict(cls, raw) -> Optional["NemHash"]:
        if not isinstance(raw, dict) or not raw.get("data"):
            return None
        return cls(data=str(raw["data"]))


@dataclass(frozen=True)
class NemAnnounceResult:
    type: Union[TypeNemAnnounceResult, int]
    code: int
    message: str
    transaction_hash: Optional[NemHash] = None
    inner_transaction_hash: Optional[NemHash] = None

    @classmethod
    def from_dict(cls, raw: dict) -> "NemAnnounceResult":
        result_type = int(raw["type"])
        try:
            result_type = TypeNemAnnounceResult(result_type)
        except ValueError:
            pass  # unknown types are kept as plain ints
        return cls(
            type=result_type,
            code=int(raw["code"]),
            message=str(raw.get("message", "")),
            transaction_hash=NemHash.from_dict(raw.get("transactionHash")),
            inner_transaction_hash=NemHash.from_dict(raw.get("innerTransactionHash")),
        )

    @property
    def description(self) -> Optional[str]:
        return describe_announce_result(self.type, self.code)

    @property
    def is_success(self) -> bool:
        if self.type == TypeNemAnnounceResult.Validation:
            return self.code in (0, 1)
        if self.type == TypeNemAnnounceResult.HeartBeat:
            return self.code == 1
        return False
