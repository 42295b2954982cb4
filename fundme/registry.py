import json
from collections import defaultdict
from pathlib import Path
from typing import TYPE_CHECKING, List, NamedTuple

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address
from eth_typing import ABI

from fundme.utils import DeploymentConfigError, _load_json

if TYPE_CHECKING:
    from fundme.params import ContractHandle

ChainId = int
ContractName = str


STANDARD_REGISTRY_JSON_FORMAT = {"indent": 4, "separators": (",", ": ")}


class RegistryEntry(NamedTuple):
    """Represents a single entry in a contract registry."""

    chain_id: ChainId
    name: ContractName
    address: ChecksumAddress
    abi: ABI
    tx_hash: str
    block_number: int
    deployer: str


def _get_abi(handle: "ContractHandle") -> ABI:
    """Returns the ABI of a deployed contract."""
    contract_abi = list()
    for entry in handle.contract.contract_type.abi:
        contract_abi.append(entry.model_dump(mode="json"))
    return contract_abi


def _get_entry(handle: "ContractHandle", chain_id: ChainId) -> RegistryEntry:
    receipt = handle.receipt
    if receipt is None:
        raise ValueError(f"No deployment receipt for {handle.name} at {handle.address}.")
    entry = RegistryEntry(
        chain_id=chain_id,
        name=handle.name,
        address=to_checksum_address(handle.address),
        abi=_get_abi(handle),
        tx_hash=str(receipt.txn_hash),
        block_number=receipt.block_number,
        deployer=receipt.transaction.sender,
    )
    return entry


def read_registry(filepath: Path) -> List[RegistryEntry]:
    data = _load_json(filepath)
    registry_entries = list()
    for chain_id, entries in data.items():
        for contract_name, artifacts in entries.items():
            registry_entry = RegistryEntry(
                chain_id=int(chain_id),
                name=contract_name,
                address=artifacts["address"],
                abi=artifacts["abi"],
                tx_hash=artifacts["tx_hash"],
                block_number=artifacts["block_number"],
                deployer=artifacts["deployer"],
            )
            registry_entries.append(registry_entry)
    return registry_entries


def write_registry(entries: List[RegistryEntry], filepath: Path) -> Path:
    """Writes a contract registry to a file."""

    if not entries:
        print("No entries provided.")
        return filepath

    entries.sort(key=lambda entry: (str(entry.chain_id), entry.name))

    data = defaultdict(dict)
    for entry in entries:
        entry_abi = list(entry.abi)
        entry_abi.sort(key=lambda d: (d["type"], d.get("name", "")))

        data[str(entry.chain_id)][entry.name] = {
            "address": entry.address,
            "abi": entry_abi,
            "tx_hash": entry.tx_hash,
            "block_number": int(entry.block_number),
            "deployer": entry.deployer,
        }

    filepath.parent.mkdir(parents=True, exist_ok=True)

    # Merge into an existing registry unless it already covers these chains
    if filepath.exists():
        print(f"Updating existing registry at {filepath}.")
        existing_data = _load_json(filepath)

        if any(chain_id in existing_data for chain_id in data):
            filepath = filepath.with_suffix(".unmerged.json")
            print(
                "Cannot merge registries with overlapping chain IDs.\n"
                f"Writing to {filepath} to avoid overwriting existing data."
            )
        else:
            existing_data.update(data)
            data = existing_data
    else:
        print(f"Creating new registry at {filepath}.")

    with open(filepath, "w") as file:
        json.dump(data, file, **STANDARD_REGISTRY_JSON_FORMAT)

    return filepath


def registry_from_handles(
    handles: List["ContractHandle"], chain_id: ChainId, output_filepath: Path
) -> Path:
    """Creates a contract registry from freshly deployed contracts."""
    entries = [_get_entry(handle=handle, chain_id=chain_id) for handle in handles]
    output_filepath = write_registry(entries=entries, filepath=output_filepath)
    print(f"(i) Registry written to {output_filepath}!")
    return output_filepath


def entry_from_registry(
    filepath: Path, chain_id: ChainId, contract_name: ContractName
) -> RegistryEntry:
    """Looks up the registry entry of a contract deployed on the given chain."""
    for entry in read_registry(filepath=filepath):
        if entry.chain_id == chain_id and entry.name == contract_name:
            return entry
    raise DeploymentConfigError(
        f"Contract '{contract_name}' not found in registry, '{filepath}', for chain {chain_id}"
    )


def address_from_registry(
    filepath: Path, chain_id: ChainId, contract_name: ContractName
) -> ChecksumAddress:
    entry = entry_from_registry(filepath=filepath, chain_id=chain_id, contract_name=contract_name)
    return to_checksum_address(entry.address)
