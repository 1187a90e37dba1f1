from moccasin.boa_tools import VyperContract

from contracts.mocks import mock_v3_aggregator

DECIMALS = 8
INITIAL_PRICE = int(2000e8)


def deploy_price_feed() -> VyperContract:
    """
    Deploys a mock ETH/USD price feed for local networks.

    Returns:
        VyperContract: The deployed mock aggregator, answering INITIAL_PRICE.
    """
    price_feed = mock_v3_aggregator.deploy(DECIMALS, INITIAL_PRICE)
    print(f"Mock price feed deployed at: {price_feed.address}")
    return price_feed


def moccasin_main() -> VyperContract:
    return deploy_price_feed()
