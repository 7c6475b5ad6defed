"""Connector type discriminator."""

from enum import Enum

from artie_client.shared.errors import TranslationError


class ConnectorType(str, Enum):
    """Supported connector kinds."""
    BIGQUERY = "bigquery"
    DYNAMODB = "dynamodb"
    MONGODB = "mongodb"
    MYSQL = "mysql"
    MSSQL = "mssql"
    ORACLE = "oracle"
    POSTGRESQL = "postgresql"
    REDSHIFT = "redshift"
    S3 = "s3"
    SNOWFLAKE = "snowflake"

    @classmethod
    def from_string(cls, value: str) -> "ConnectorType":
        """Resolve a discriminator string, failing on unknown values."""
        try:
            return cls(value)
        except ValueError:
            raise TranslationError(f"invalid connector type: {value}") from None


ALL_SOURCE_TYPES = [
    ConnectorType.DYNAMODB,
    ConnectorType.MONGODB,
    ConnectorType.MYSQL,
    ConnectorType.MSSQL,
    ConnectorType.ORACLE,
    ConnectorType.POSTGRESQL,
]

ALL_DESTINATION_TYPES = [
    ConnectorType.BIGQUERY,
    ConnectorType.MSSQL,
    ConnectorType.REDSHIFT,
    ConnectorType.S3,
    ConnectorType.SNOWFLAKE,
]

ALL_CONNECTOR_TYPES = list(ConnectorType)


def destination_type_from_string(value: str) -> ConnectorType:
    """Resolve a discriminator string that must name a destination-capable type."""
    connector_type = ConnectorType.from_string(value)
    if connector_type not in ALL_DESTINATION_TYPES:
        raise TranslationError(f"invalid destination type: {value}")
    return connector_type
