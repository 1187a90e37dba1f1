from eth_utils import to_wei
from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

SEND_VALUE = to_wei(0.01, "ether")


def fund_fund_me(fund_me: VyperContract, value: int = SEND_VALUE) -> None:
    fund_me.fund(value=value)
    print(f"Funded {fund_me.address} with {value} wei")


def withdraw_fund_me(fund_me: VyperContract, cheaper: bool = False) -> None:
    """Withdraws the whole balance; the active account must be the owner."""
    if cheaper:
        fund_me.cheaperWithdraw()
    else:
        fund_me.withdraw()
    print(f"Withdrew from {fund_me.address} to {fund_me.getOwner()}")


def moccasin_main() -> None:
    fund_me: VyperContract = get_active_network().manifest_named("fund_me")
    fund_fund_me(fund_me)
    withdraw_fund_me(fund_me)
