from typing import List, Optional

from sql2godb.exceptions import Sql2GoDBError
from sql2godb.lib.table import Table


class BlockResult:
    """Outcome of one CREATE ... ); block: a table (and its code) or an error."""

    def __init__(
        self,
        table_name: Optional[str] = None,
        table: Optional[Table] = None,
        code: str = "",
        error: Optional[Sql2GoDBError] = None,
        imports: Optional[set] = None,
    ):
        self.table_name = table_name or (table.table_name if table else None)
        self.table = table
        self.code = code
        self.error = error
        self.imports = imports or set()

    @property
    def ok(self) -> bool:
        return self.error is None

    def __repr__(self):
        status = "ok" if self.ok else f"error={self.error}"
        return f"<BlockResult table={self.table_name} {status}>"


class GenerationReport:
    def __init__(self, source: str, results: Optional[List[BlockResult]] = None):
        self.source = source
        self.results = results or []

    @property
    def generated(self) -> List[BlockResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[BlockResult]:
        return [r for r in self.results if not r.ok]

    def __repr__(self):
        return f"<GenerationReport generated={len(self.generated)} failed={len(self.failed)}>"
