from typing import List, Optional


class Column:
    def __init__(
        self,
        name: str,
        sql_type: str,
        not_null: bool = False,
        lineno: Optional[int] = None,
    ):
        self.name = name
        self.sql_type = sql_type
        self.not_null = not_null
        self.lineno = lineno

    @property
    def nullable(self) -> bool:
        return not self.not_null

    def __eq__(self, other):
        if not isinstance(other, Column):
            return NotImplemented
        return (
            self.name == other.name
            and self.sql_type == other.sql_type
            and self.not_null == other.not_null
        )

    def __repr__(self):
        flag = " not_null" if self.not_null else ""
        return f"<Column name={self.name} sql_type={self.sql_type}{flag}>"


class Table:
    def __init__(
        self,
        table_name: str,
        columns: Optional[List[Column]] = None,
        lineno: Optional[int] = None,
    ):
        self.table_name = table_name
        self.columns = columns or []
        self.lineno = lineno

    def add_column(self, column: Column) -> None:
        self.columns.append(column)

    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

    def get_column(self, name: str) -> Optional[Column]:
        for column in self.columns:
            if column.name == name:
                return column
        return None

    def has_column(self, name: str) -> bool:
        return self.get_column(name) is not None

    def __repr__(self):
        return f"<Table name={self.table_name} columns={self.columns}>"
