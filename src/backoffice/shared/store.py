"""Narrow record-store interface over the domain repositories.

Handlers and command handlers talk to ``RecordStore`` instead of reaching into
repositories, so every data-access call goes through one place.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from backoffice.shared.errors import NotFound, persistence_guard
from backoffice.utils.logging import get_logger

logger = get_logger(__name__)


class RecordStore:
    """create / get_by_id / update / delete / list for one aggregate class.

    Reads are unpaginated: ``filter`` and ``list`` lift the query set's default
    row limit and always return every matching record.
    """

    def __init__(self, aggregate_cls, sort_key=None):
        self.aggregate_cls = aggregate_cls
        self.sort_key = sort_key

    @property
    def kind(self) -> str:
        return self.aggregate_cls.__name__

    @property
    def repository(self):
        return current_domain.repository_for(self.aggregate_cls)

    def create(self, record):
        with persistence_guard(f"create {self.kind}"):
            self.repository.add(record)
        return record

    def get_by_id(self, identifier):
        if not identifier:
            return None
        with persistence_guard(f"get {self.kind}"):
            try:
                return self.repository.get(identifier)
            except ObjectNotFoundError:
                return None

    def require(self, identifier):
        record = self.get_by_id(identifier)
        if record is None:
            raise NotFound(self.kind, identifier)
        return record

    def update(self, identifier, **changes):
        """Apply ``changes`` through the aggregate's ``update_details`` and persist."""
        record = self.require(identifier)
        record.update_details(**changes)
        with persistence_guard(f"update {self.kind}"):
            self.repository.add(record)
        return record

    def delete(self, identifier) -> bool:
        """Remove a record by id. Unknown ids are a no-op and return False."""
        record = self.get_by_id(identifier)
        if record is None:
            logger.warning("Delete of unknown record ignored", kind=self.kind, record_id=str(identifier))
            return False
        with persistence_guard(f"delete {self.kind}"):
            self.repository._dao.delete(record)
        return True

    def filter(self, **criteria) -> list:
        with persistence_guard(f"query {self.kind}"):
            records = self.repository._dao.query.filter(**criteria).limit(None).all().items
        return self._sorted(records)

    def first(self, **criteria):
        with persistence_guard(f"query {self.kind}"):
            return self.repository._dao.query.filter(**criteria).all().first

    def list(self) -> list:
        with persistence_guard(f"list {self.kind}"):
            records = self.repository._dao.query.limit(None).all().items
        return self._sorted(records)

    def _sorted(self, records) -> list:
        if self.sort_key is None:
            return list(records)
        return sorted(records, key=self.sort_key)
