"""
ALP (Amped Liquidity Provider) APR lookup.

Reads the staked ALP supply from the reward tracker and the emission rate from
the reward distributor on Sonic, and annualizes the emission against the supply.
"""
import json
from decimal import ROUND_HALF_UP, Decimal, localcontext

from pydantic import BaseModel, Field, field_validator
from web3 import Web3
from web3.exceptions import ContractLogicError

from amped_agent import config
from amped_agent.chains import CHAIN_IDS, NETWORKS, get_chain_from_name, get_contract
from amped_agent.errors import AprCalculationError, ZeroSupplyError
from amped_agent.sdk import FunctionOptions, FunctionReturn, to_result

TWO_PLACES = Decimal("0.01")


class GetAlpAprInput(BaseModel):
    chain_name: str = Field(..., description='The name of the chain, must be "sonic".')
    account: str = Field(..., description="The account address to check APR for, e.g. 0xAbC...")

    @field_validator("account")
    @classmethod
    def validate_account(cls, value: str) -> str:
        if not Web3.is_address(value):
            raise ValueError(f"{value} is not a valid EVM address")
        return Web3.to_checksum_address(value)


def calculate_yearly_rewards(tokens_per_interval: int) -> int:
    return tokens_per_interval * config.SECONDS_PER_YEAR


def calculate_base_apr(yearly_rewards: int, total_supply: int) -> Decimal:
    """
    Annualized rate in percent, rounded half-up to two decimals.

    The division is done on integers scaled by PRECISION so the fractional part
    survives, then scaled back down.
    """
    if total_supply == 0:
        raise ZeroSupplyError()
    if total_supply < 0 or yearly_rewards < 0:
        raise AprCalculationError("On-chain reward values must be non-negative")

    scaled_apr = yearly_rewards * config.PRECISION * 100 // total_supply
    with localcontext() as ctx:
        # uint256 operands times PRECISION overflow the default 28 digits
        ctx.prec = 200
        base_apr = Decimal(scaled_apr) / Decimal(config.PRECISION)
        return base_apr.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def format_apr_payload(total_supply: int, tokens_per_interval: int) -> dict:
    yearly_rewards = calculate_yearly_rewards(tokens_per_interval)
    base_apr = calculate_base_apr(yearly_rewards, total_supply)
    return {
        "baseApr": str(base_apr),
        "yearlyRewards": str(yearly_rewards),
        "totalSupply": str(total_supply),
        "tokensPerInterval": str(tokens_per_interval),
    }


async def get_alp_apr(props: GetAlpAprInput, options: FunctionOptions) -> FunctionReturn:
    """
    Gets APR information for ALP tokens.

    Returns a successful result whose data is a JSON object with baseApr,
    yearlyRewards, totalSupply and tokensPerInterval, or a failed result with
    the reason. Provider and contract errors are never raised to the caller.
    """
    chain_name = props.chain_name
    sonic = NETWORKS["SONIC"]

    chain_id = get_chain_from_name(chain_name)
    if not chain_id:
        return to_result(f"Network {chain_name} not supported", True)
    if chain_name != sonic or chain_id != CHAIN_IDS[sonic]:
        return to_result("This function is only supported on Sonic chain", True)

    await options.notify("Checking ALP APR information...")

    try:
        provider = options.get_provider(chain_id)
        reward_tracker = get_contract(
            provider,
            config.get_contract_address(sonic, "REWARD_TRACKER"),
            "RewardTracker.json",
        )
        distributor = get_contract(
            provider,
            config.get_contract_address(sonic, "REWARD_DISTRIBUTOR"),
            "RewardDistributor.json",
        )

        await options.notify("Fetching total supply...")
        total_supply = int(await reward_tracker.functions.totalSupply().call())

        await options.notify("Fetching tokens per interval...")
        tokens_per_interval = int(await distributor.functions.tokensPerInterval().call())

        payload = format_apr_payload(total_supply, tokens_per_interval)

        await options.notify("APR calculation completed")

        return to_result(json.dumps(payload))
    except ContractLogicError as e:
        reason = getattr(e, "message", None) or str(e)
        return to_result(f"Failed to get ALP APR information: {reason}", True)
    except Exception as e:
        message = str(e) or "Unknown error"
        return to_result(f"Failed to get ALP APR information: {message}", True)
