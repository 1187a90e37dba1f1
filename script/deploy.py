from dataclasses import dataclass
from typing import Optional, Tuple, Union

import boa
from boa.rpc import RPCError
from eth_utils import is_address, to_checksum_address
from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from contracts import fund_me
from script.errors import DeploymentError
from script.helper_config import DEVELOPMENT_NETWORKS, PriceFeedResolver

ZERO_ADDRESS = "0x" + "00" * 20


@dataclass(frozen=True)
class DeploymentRecord:
    contract_address: str
    constructor_args: Tuple
    contract: VyperContract


def _as_address(value: Union[str, VyperContract]) -> str:
    """
    Normalizes a contract handle or address string for deployment.

    Args:
        value: A contract, an account or an address string.

    Returns:
        str: The checksummed address.
    """
    address = getattr(value, "address", value)
    if not isinstance(address, str) or not is_address(address):
        raise DeploymentError(f"Malformed address: {address!r}")
    address = to_checksum_address(address)
    if address == ZERO_ADDRESS:
        raise DeploymentError("The zero address is not a valid deployment argument")
    return address


def deploy_fund_me(price_feed, owner=None) -> DeploymentRecord:
    """
    Deploys the FundMe contract against a price feed.

    Args:
        price_feed: The price feed contract or its address.
        owner: Account (or address) signing the deployment, the active
            account when omitted. It becomes the contract owner.

    Returns:
        DeploymentRecord: The deployed address, constructor arguments and
        contract handle.
    """
    price_feed_address = _as_address(price_feed)
    constructor_args = (price_feed_address,)
    try:
        if owner is None:
            fund_me_contract: VyperContract = fund_me.deploy(*constructor_args)
        else:
            with boa.env.prank(_as_address(owner)):
                fund_me_contract = fund_me.deploy(*constructor_args)
    except (boa.BoaError, RPCError) as e:
        raise DeploymentError(f"FundMe deployment rejected: {e}") from e

    print(f"FundMe deployed to {fund_me_contract.address}")
    return DeploymentRecord(
        contract_address=fund_me_contract.address,
        constructor_args=constructor_args,
        contract=fund_me_contract,
    )


def deploy_pipeline(
    active_network=None, resolver: Optional[PriceFeedResolver] = None
) -> DeploymentRecord:
    """
    Resolves the price feed (deploying the mock on development networks),
    then deploys FundMe against it.
    """
    if active_network is None:
        active_network = get_active_network()
    if resolver is None:
        resolver = PriceFeedResolver()

    is_development = active_network.name in DEVELOPMENT_NETWORKS
    price_feed = resolver.resolve(active_network.chain_id, is_development)
    print(f"network: {active_network.name} , using price feed at {price_feed}")

    record = deploy_fund_me(price_feed)
    if active_network.has_explorer() and active_network.is_local_or_forked_network() is False:
        result = active_network.moccasin_verify(record.contract)
        result.wait_for_verification()
    return record


def moccasin_main() -> VyperContract:
    """
    Main deployment function for Moccasin framework.

    Returns:
        VyperContract: The deployed FundMe contract instance.
    """
    return deploy_pipeline().contract
