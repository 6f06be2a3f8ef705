from enum import Enum


class TxType(str, Enum):
    TRANSFER = "transfer"
    NATIVE_TOKEN_TRANSFER = "native_token_transfer"
    CONTRACT_CALL = "contract_call"
    UNSUPPORTED = "unsupported"


class TxStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class Direction(str, Enum):
    OUTGOING = "outgoing"
    INCOMING = "incoming"
    SELF = "self"
