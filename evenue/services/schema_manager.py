"""
Schema management for the Evenue database.

Rebuilds the schema from the declarative models and empties every table the
connected database reports.
"""
import logging
from typing import List

from sqlalchemy import Enum, inspect, text
from sqlalchemy.engine import Engine

from evenue.database import engine as default_engine, install_extensions
from evenue.models import Base


class SchemaManager:
    """Drops, recreates and truncates the Evenue schema."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.logger = logging.getLogger(self.__class__.__name__)
        self.preparer = engine.dialect.identifier_preparer

    def enum_type_names(self) -> List[str]:
        """Names of the enumeration types declared by the models."""
        names = []
        for table in Base.metadata.sorted_tables:
            for column in table.columns:
                if isinstance(column.type, Enum) and column.type.name not in names:
                    names.append(column.type.name)
        return names

    def structure_database(self):
        """Drop every model table and enum type, then create them afresh.

        Tables are dropped with CASCADE so rows in child tables cannot be
        left orphaned, even by tables the models do not know about.
        """
        with self.engine.begin() as conn:
            install_extensions(conn)

            for table in reversed(Base.metadata.sorted_tables):
                conn.execute(text(f"DROP TABLE IF EXISTS {self.preparer.format_table(table)} CASCADE"))
                self.logger.debug(f"Dropped table {table.name}")

            for type_name in self.enum_type_names():
                conn.execute(text(f"DROP TYPE IF EXISTS {self.preparer.quote(type_name)} CASCADE"))
                self.logger.debug(f"Dropped type {type_name}")

            Base.metadata.create_all(bind=conn)

        self.logger.info(f"Created {len(Base.metadata.sorted_tables)} tables")

    def list_tables(self) -> List[str]:
        """Table names reported by the live database, sorted."""
        return sorted(inspect(self.engine).get_table_names())

    def truncate_tables(self) -> List[str]:
        """Truncate every table in the database, cascading to dependents."""
        table_names = self.list_tables()

        with self.engine.begin() as conn:
            for table_name in table_names:
                conn.execute(text(f"TRUNCATE TABLE {self.preparer.quote(table_name)} CASCADE"))
                self.logger.debug(f"Truncated table {table_name}")

        self.logger.info(f"Truncated {len(table_names)} tables")
        return table_names


def create_schema_manager(engine: Engine = None) -> SchemaManager:
    """Factory function to create a schema manager bound to the app engine."""
    return SchemaManager(engine if engine is not None else default_engine)
