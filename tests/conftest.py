import boa
import pytest
from eth_utils import to_wei
from moccasin._sys_path_and_config_setup import (
    _set_sys_path,
    _setup_network_and_account_from_config_and_cli,
    get_sys_paths_list,
)
from moccasin.config import get_config, initialize_global_config

from script.deploy import deploy_fund_me
from script.deploy_mocks import INITIAL_PRICE
from script.helper_config import PriceFeedResolver

SEND_VALUE = to_wei(1, "ether")
STARTING_BALANCE = to_wei(100, "ether")
# smallest contribution worth MINIMUM_USD at the mock's price
MINIMUM_FUND = to_wei(5, "ether") * 10**18 // (INITIAL_PRICE * 10**10)

pytest_plugins = ["moccasin.plugin"]


def pytest_configure(config):
    # mirror the setup `mox test` performs before handing off to pytest
    initialize_global_config()
    _set_sys_path(get_sys_paths_list(get_config()))
    _setup_network_and_account_from_config_and_cli()


@pytest.fixture(scope="session")
def resolver():
    return PriceFeedResolver()


@pytest.fixture(scope="session")
def eth_usd(resolver):
    return resolver.mock()


@pytest.fixture(scope="function")
def fund_me(eth_usd):
    return deploy_fund_me(eth_usd).contract


@pytest.fixture(scope="function")
def deployer(fund_me):
    owner = fund_me.getOwner()
    boa.env.set_balance(owner, STARTING_BALANCE)
    return owner


@pytest.fixture(scope="function")
def fund_me_funded(fund_me, deployer):
    with boa.env.prank(deployer):
        fund_me.fund(value=SEND_VALUE)
    return fund_me


@pytest.fixture(scope="function")
def funders():
    funders = [boa.env.generate_address(f"funder_{i}") for i in range(5)]
    for funder in funders:
        boa.env.set_balance(funder, STARTING_BALANCE)
    return funders


@pytest.fixture(scope="function")
def fund_me_multi_funded(fund_me, deployer, funders):
    for funder in funders:
        with boa.env.prank(funder):
            fund_me.fund(value=SEND_VALUE)
    return fund_me
