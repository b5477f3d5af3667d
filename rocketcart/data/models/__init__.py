#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from rocketcart.data.models.snapshot import CartSnapshotModel

__all__ = ["CartSnapshotModel"]
