"""Domain model for pipeline tables.

The API nests a table's optional settings under ``advancedSettings``; here
they sit directly on :class:`Table`. Lists read back from the API are always
lists, never ``None``, so a table configured with ``[]`` compares equal to
what the API returns for it.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from artie_client.clients import pipeline_client as api
from artie_client.models.util import list_or_empty, parse_uuid, uuid_to_string


@dataclass
class MergePredicate:
    partition_field: str
    partition_type: Optional[str] = None

    def to_api_model(self) -> api.MergePredicate:
        return api.MergePredicate(
            partition_field=self.partition_field,
            partition_type=self.partition_type or "",
        )

    @classmethod
    def from_api_model(cls, api_model: api.MergePredicate) -> "MergePredicate":
        return cls(
            partition_field=api_model.partition_field,
            partition_type=api_model.partition_type or None,
        )


@dataclass
class SoftPartitioning:
    enabled: bool
    partition_frequency: str = ""
    partition_column: str = ""
    max_partitions: int = 0

    def to_api_model(self) -> api.SoftPartitioning:
        return api.SoftPartitioning(
            enabled=self.enabled,
            partition_frequency=self.partition_frequency,
            partition_column=self.partition_column,
            max_partitions=self.max_partitions,
        )

    @classmethod
    def from_api_model(cls, api_model: api.SoftPartitioning) -> "SoftPartitioning":
        return cls(
            enabled=api_model.enabled,
            partition_frequency=api_model.partition_frequency,
            partition_column=api_model.partition_column,
            max_partitions=api_model.max_partitions,
        )


@dataclass
class Table:
    """A replicated table with its advanced settings flattened.

    ``None`` means "not configured" for every optional setting. For list
    settings, ``None`` is left out of the request while ``[]`` is sent as an
    explicit empty list.
    """

    name: str
    schema: str = ""
    uuid: Optional[str] = None
    enable_history_mode: bool = False
    is_partitioned: bool = False

    alias: Optional[str] = None
    columns_to_exclude: Optional[List[str]] = None
    columns_to_include: Optional[List[str]] = None
    columns_to_hash: Optional[List[str]] = None
    skip_deletes: Optional[bool] = None
    unify_across_schemas: Optional[bool] = None
    unify_across_databases: Optional[bool] = None
    merge_predicates: Optional[List[MergePredicate]] = None
    soft_partitioning: Optional[SoftPartitioning] = None
    backfill_history_table: Optional[bool] = None

    @property
    def key(self) -> str:
        if self.schema:
            return f"{self.schema}.{self.name}"
        return self.name

    def to_api_model(self) -> api.Table:
        # An empty predicate list is the same as none at all.
        merge_predicates = None
        if self.merge_predicates:
            merge_predicates = [predicate.to_api_model() for predicate in self.merge_predicates]

        return api.Table(
            uuid=parse_uuid(self.uuid) if self.uuid else None,
            name=self.name,
            schema=self.schema,
            enable_history_mode=self.enable_history_mode,
            is_partitioned=self.is_partitioned,
            advanced_settings=api.AdvancedTableSettings(
                alias=self.alias,
                exclude_columns=self.columns_to_exclude,
                include_columns=self.columns_to_include,
                columns_to_hash=self.columns_to_hash,
                skip_deletes=self.skip_deletes,
                unify_across_schemas=self.unify_across_schemas,
                unify_across_databases=self.unify_across_databases,
                merge_predicates=merge_predicates,
                soft_partitioning=self.soft_partitioning.to_api_model() if self.soft_partitioning else None,
                should_backfill_history_table=self.backfill_history_table,
            ),
        )

    @classmethod
    def from_api_model(cls, api_model: api.Table) -> "Table":
        settings = api_model.advanced_settings or api.AdvancedTableSettings()
        return cls(
            uuid=uuid_to_string(api_model.uuid),
            name=api_model.name,
            schema=api_model.schema,
            enable_history_mode=api_model.enable_history_mode,
            is_partitioned=api_model.is_partitioned,
            alias=settings.alias,
            columns_to_exclude=list_or_empty(settings.exclude_columns),
            columns_to_include=list_or_empty(settings.include_columns),
            columns_to_hash=list_or_empty(settings.columns_to_hash),
            skip_deletes=settings.skip_deletes,
            unify_across_schemas=settings.unify_across_schemas,
            unify_across_databases=settings.unify_across_databases,
            merge_predicates=[
                MergePredicate.from_api_model(predicate)
                for predicate in list_or_empty(settings.merge_predicates)
            ],
            soft_partitioning=(
                SoftPartitioning.from_api_model(settings.soft_partitioning)
                if settings.soft_partitioning else None
            ),
            backfill_history_table=settings.should_backfill_history_table,
        )


def tables_from_api_model(api_tables: List[api.Table]) -> Dict[str, Table]:
    """Key tables by ``schema.name``, or by ``name`` when the schema is empty."""
    tables = {}
    for api_table in api_tables:
        table = Table.from_api_model(api_table)
        tables[table.key] = table
    return tables


def tables_to_api_model(tables: Dict[str, Table]) -> List[api.Table]:
    return [table.to_api_model() for table in tables.values()]
