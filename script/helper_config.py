from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from eth_utils import to_checksum_address
from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from script.errors import ConfigurationError

DEVELOPMENT_NETWORKS = ("pyevm", "eravm", "anvil", "localhost")


@dataclass(frozen=True)
class NetworkProfile:
    chain_id: int
    name: str
    price_feed: Optional[str] = None


def manifest_price_feed() -> VyperContract:
    """The active network's `price_feed`, deployed by script/deploy_mocks.py if needed."""
    return get_active_network().manifest_named("price_feed")


NETWORK_PROFILES = MappingProxyType(
    {
        1: NetworkProfile(1, "mainnet", "0x5f4eC3Df9cbd43714FE2740f5E3616155c5b8419"),
        137: NetworkProfile(137, "polygon", "0xF9680D99D6C9589e2a93a78A04A279e509205945"),
        300: NetworkProfile(300, "zksync-sepolia", "0xfEefF7c3fB57d18C5C6Cdd71e45D2D0b4F9377bF"),
        11155111: NetworkProfile(11155111, "sepolia", "0x694AA1769357215DE4FAC081bf1f309aDC325306"),
    }
)


class PriceFeedResolver:
    """
    Picks the ETH/USD price feed FundMe is deployed against.

    Live networks are looked up in the profiles table. Development networks
    get the mock aggregator moccasin manifests as `price_feed`, fetched on
    first use and reused afterwards.
    """

    def __init__(
        self,
        profiles: Mapping[int, NetworkProfile] = NETWORK_PROFILES,
        deploy_mock: Callable[[], VyperContract] = manifest_price_feed,
    ):
        self._profiles = MappingProxyType(dict(profiles))
        self._deploy_mock = deploy_mock
        self._mock: Optional[VyperContract] = None

    @property
    def profiles(self) -> Mapping[int, NetworkProfile]:
        return self._profiles

    def mock(self) -> VyperContract:
        if self._mock is None:
            self._mock = self._deploy_mock()
        return self._mock

    def resolve(self, network_id: Optional[int], is_development: bool) -> str:
        """
        Returns the checksummed price feed address for a network.

        Raises:
            ConfigurationError: The network is unknown or has no price feed.
        """
        if is_development:
            return to_checksum_address(self.mock().address)

        profile = self._profiles.get(network_id)
        if profile is None:
            raise ConfigurationError(f"No network profile for chain id {network_id}")
        if profile.price_feed is None:
            raise ConfigurationError(
                f"Network {profile.name} (chain id {network_id}) has no price feed"
            )
        return to_checksum_address(profile.price_feed)
