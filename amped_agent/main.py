import json

from fastapi import Depends, FastAPI
from pydantic import BaseModel

from amped_agent import config
from amped_agent.alp_apr import GetAlpAprInput, get_alp_apr
from amped_agent.chains import get_provider
from amped_agent.sdk import FunctionOptions, collecting_notifier

app = FastAPI(title="Amped ALP Agent")


class AlpAprRequest(BaseModel):
    chain_name: str
    account: str


def provider_factory():
    return get_provider


@app.get("/")
def read_root():
    return {
        "message": "Amped ALP Agent is running.",
        "chain_id": config.SONIC_CHAIN_ID,
        "reward_tracker_address": config.CONTRACT_ADDRESSES["sonic"]["REWARD_TRACKER"],
        "reward_distributor_address": config.CONTRACT_ADDRESSES["sonic"]["REWARD_DISTRIBUTOR"],
    }


@app.get("/health")
async def health_check(factory=Depends(provider_factory)):
    """Sonic RPC connectivity check."""
    try:
        w3 = factory(config.SONIC_CHAIN_ID)
        connected = await w3.is_connected()
        latest_block = await w3.eth.block_number if connected else None
        return {
            "success": True,
            "health": {
                "sonic_connected": connected,
                "latest_block": latest_block,
                "rpc_url": config.SONIC_RPC_URL,
            },
        }
    except Exception as e:
        print(f"❌ Health check failed: {e}")
        return {"success": False, "error": str(e)}


@app.post("/alp-apr")
async def alp_apr(request: AlpAprRequest, factory=Depends(provider_factory)):
    """Direct ALP APR lookup bypassing the agent."""
    try:
        props = GetAlpAprInput(chain_name=request.chain_name, account=request.account)
    except ValueError as e:
        return {"success": False, "error": str(e), "progress": []}

    notify, progress = collecting_notifier()
    result = await get_alp_apr(props, FunctionOptions(get_provider=factory, notify=notify))
    if result.success:
        return {"success": True, "data": json.loads(result.data), "progress": progress}
    return {"success": False, "error": result.data, "progress": progress}

# To run: uvicorn amped_agent.main:app --reload
