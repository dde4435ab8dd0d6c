from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase

# SQLite only autoincrements an INTEGER PRIMARY KEY
BigIntPK = BigInteger().with_variant(Integer, "sqlite")

# value ranges of the integer column types
INT_MIN, INT_MAX = -2**31, 2**31 - 1
BIGINT_MIN, BIGINT_MAX = -2**63, 2**63 - 1


class Base(DeclarativeBase):
    """Base class for all models."""
