from langchain_core.tools import tool

from amped_agent.alp_apr import GetAlpAprInput, get_alp_apr
from amped_agent.chains import get_provider
from amped_agent.sdk import FunctionOptions, print_notifier

# ==============================================================================
# AGENT TOOLS
# ==============================================================================


@tool("get_alp_apr", args_schema=GetAlpAprInput)
async def get_alp_apr_tool(chain_name: str, account: str) -> str:
    """
    Gets the current APR for ALP (Amped Liquidity Provider) tokens on Sonic.
    Reads the staked ALP supply and the reward emission rate on-chain and returns
    a JSON object with baseApr (percent), yearlyRewards, totalSupply and tokensPerInterval.
    Input: chain_name (must be "sonic") and the account address to check APR for.
    Async only: call it with ainvoke, as the agent executor does.
    """
    print(f"Tool: get_alp_apr (Chain: {chain_name}, Account: {account})")
    result = await get_alp_apr(
        GetAlpAprInput(chain_name=chain_name, account=account),
        FunctionOptions(get_provider=get_provider, notify=print_notifier),
    )
    if result.success:
        return result.data
    return f"Error: {result.data}"


TOOLS = [get_alp_apr_tool]
