"""Application layer: ports. Depends only on domain."""

from contactbook.application.ports import RecordCollection

__all__ = ["RecordCollection"]
