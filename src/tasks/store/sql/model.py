from sqlalchemy import Boolean, Column, Integer, MetaData, Table, Text, false


def build_tasks_table(metadata: MetaData, table_name: str = "tasks") -> Table:
    return Table(
        table_name,
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("task", Text, nullable=False),
        Column("done", Boolean, nullable=False, server_default=false()),
    )
