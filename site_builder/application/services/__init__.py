from .snapshot_publisher import SnapshotPublisher
from .state_codec import BlobCodec
from .session_gate import SessionGate
from .content_store import ContentStore
from .financial_summary import summarize_transactions
from .ledger_store import LedgerStore, transaction_categories

__all__ = [
    "SnapshotPublisher",
    "BlobCodec",
    "SessionGate",
    "ContentStore",
    "summarize_transactions",
    "LedgerStore",
    "transaction_categories",
]
