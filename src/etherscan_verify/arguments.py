"""Constructor argument encoding for verification submissions."""

import re
from typing import Any, Dict, List, Optional

from eth_abi import encode
from eth_abi.exceptions import EncodingError

from .exceptions import ArgumentEncodingError

ARRAY_SUFFIX = re.compile(r"^(.*)\[(\d*)\]$")


def find_constructor(abi: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return the constructor entry of an ABI, or None."""
    for item in abi:
        if item.get("type") == "constructor":
            return item
    return None


def canonical_type(param: Dict[str, Any]) -> str:
    """
    Collapse an ABI parameter into the type string eth_abi expects.

    Tuples are expanded from their components, keeping array suffixes:
    {"type": "tuple[]", "components": [uint256, address]} -> "(uint256,address)[]"
    """
    abi_type = param["type"]
    if not abi_type.startswith("tuple"):
        return abi_type
    inner = ",".join(canonical_type(c) for c in param.get("components", []))
    return f"({inner}){abi_type[len('tuple'):]}"


def _normalize(param: Dict[str, Any], abi_type: str, value: Any, where: str) -> Any:
    array = ARRAY_SUFFIX.match(abi_type)
    if array:
        element_type, length = array.groups()
        if not isinstance(value, (list, tuple)):
            raise ArgumentEncodingError(f"{where}: expected a list for {abi_type}, got {value!r}")
        if length and len(value) != int(length):
            raise ArgumentEncodingError(
                f"{where}: expected {length} elements for {abi_type}, got {len(value)}"
            )
        return [
            _normalize(param, element_type, v, f"{where}[{i}]") for i, v in enumerate(value)
        ]

    if abi_type == "tuple":
        components = param.get("components", [])
        if isinstance(value, dict):
            try:
                value = [value[c["name"]] for c in components]
            except KeyError as e:
                raise ArgumentEncodingError(f"{where}: missing tuple field {e}") from e
        if not isinstance(value, (list, tuple)) or len(value) != len(components):
            raise ArgumentEncodingError(
                f"{where}: expected {len(components)} tuple fields, got {value!r}"
            )
        return tuple(
            _normalize(c, c["type"], v, f"{where}.{c.get('name') or i}")
            for i, (c, v) in enumerate(zip(components, value))
        )

    if abi_type.startswith(("uint", "int")):
        # Serialized BigNumber from ethers
        if isinstance(value, dict) and "hex" in value:
            value = value["hex"]
        if isinstance(value, str):
            try:
                return int(value, 0)
            except ValueError as e:
                raise ArgumentEncodingError(f"{where}: {value!r} is not an integer") from e
        return value

    if abi_type.startswith("bytes") and isinstance(value, str):
        try:
            return bytes.fromhex(value[2:] if value.startswith("0x") else value)
        except ValueError as e:
            raise ArgumentEncodingError(f"{where}: {value!r} is not hex") from e

    return value


def encode_constructor_arguments(abi: List[Dict[str, Any]], args: List[Any]) -> Optional[str]:
    """
    ABI-encode constructor arguments the way the explorer expects them.

    Args:
        abi: Contract ABI
        args: Constructor arguments as stored in the deployment record

    Returns:
        Hex string without 0x prefix ("" for a constructor without inputs),
        or None if the ABI has no constructor and no arguments were given

    Raises:
        ArgumentEncodingError: If the arguments do not match the constructor inputs
    """
    constructor = find_constructor(abi)
    if constructor is None:
        if args:
            raise ArgumentEncodingError(
                f"{len(args)} constructor argument(s) given but the ABI has no constructor"
            )
        return None

    inputs = constructor.get("inputs", [])
    if len(inputs) != len(args):
        raise ArgumentEncodingError(
            f"constructor expects {len(inputs)} argument(s), got {len(args)}"
        )

    types = [canonical_type(param) for param in inputs]
    values = [
        _normalize(param, param["type"], value, param.get("name") or f"arg{i}")
        for i, (param, value) in enumerate(zip(inputs, args))
    ]

    try:
        return encode(types, values).hex()
    except (EncodingError, TypeError, ValueError) as e:
        raise ArgumentEncodingError(f"failed to encode constructor arguments: {e}") from e
