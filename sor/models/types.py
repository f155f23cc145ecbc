"""Shared type definitions for pool catalog models."""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import BeforeValidator, Field


def validate_decimal_string(value: Any) -> str:
    """Validate that a value is a finite decimal number.

    Args:
        value: Value to validate (string, int or Decimal)

    Returns:
        The value as a decimal string

    Raises:
        ValueError: If value is not a finite decimal number
    """
    if isinstance(value, bool):
        raise ValueError(f"Decimal must be string or number, got {type(value).__name__}")

    if isinstance(value, (int, Decimal)):
        value = str(value)

    if not isinstance(value, str):
        raise ValueError(f"Decimal must be string or number, got {type(value).__name__}")

    try:
        parsed = Decimal(value)
    except InvalidOperation as err:
        raise ValueError(f"Decimal must be a decimal number string: '{value}'") from err

    if not parsed.is_finite():
        raise ValueError(f"Decimal must be finite: '{value}'")

    return value


# Ethereum address (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]

# Human-readable decimal amount (e.g. "1000.25"), kept as a string
DecimalString = Annotated[
    str,
    BeforeValidator(validate_decimal_string),
    Field(description="Decimal number as string"),
]


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Ethereum address to lowercase.

    Args:
        address: An Ethereum address (with or without 0x prefix)
        validate: If True, raises ValueError for invalid addresses.

    Returns:
        Lowercase address with 0x prefix

    Raises:
        ValueError: If validate=True and address is not a valid Ethereum address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address."""
    if not isinstance(address, str):
        return False
    if not address.startswith("0x"):
        return False
    if len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False
