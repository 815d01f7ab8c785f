from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

ABIS_DIR = Path(__file__).parent / "abis"

ERC20_ABI_PATH = ABIS_DIR / "ERC20.json"


def load_abi(path: str | Path) -> list[dict]:
    """Load an ABI from a JSON file and return its "abi" field.

    Args:
        path: Path to the JSON file containing an "abi" field.

    Returns:
        ABI as a list of dictionaries.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        KeyError: If the JSON does not contain an "abi" field.
    """
    p = Path(path)
    with p.open() as f:
        data = json.load(f)
    return data["abi"]


def load_erc20_abi() -> list[dict]:
    """Load the ERC20 ABI."""
    return load_abi(ERC20_ABI_PATH)


ABI_NAMESPACES: dict[str, Callable[[], list[dict]]] = {
    "erc20": load_erc20_abi,
}


def resolve_function_abi(abi: str | dict[str, Any]) -> dict[str, Any]:
    """Resolve a function ABI fragment.

    Accepts either a fragment dict, returned unchanged, or a
    ``"<namespace>:<function>"`` shorthand such as ``"erc20:totalSupply"``.

    Raises:
        ValueError: If the namespace or function is unknown, or the
            fragment is not a function.
    """
    if isinstance(abi, dict):
        if abi.get("type", "function") != "function" or "name" not in abi:
            raise ValueError(f"Not a function ABI fragment: {abi}")
        return abi

    namespace, sep, fn_name = abi.partition(":")
    if not sep or not fn_name:
        raise ValueError(
            f"ABI shorthand must look like '<namespace>:<function>', got {abi!r}"
        )
    loader = ABI_NAMESPACES.get(namespace.lower())
    if loader is None:
        raise ValueError(
            f"Unknown ABI namespace '{namespace}'. "
            f"Available: {', '.join(ABI_NAMESPACES.keys())}"
        )

    for entry in loader():
        if entry.get("type") == "function" and entry.get("name") == fn_name:
            return entry
    raise ValueError(f"Function '{fn_name}' not found in {namespace} ABI")
