#!/usr/bin/env python3
"""
Example: prepare an unsigned withdraw transaction on the child chain.

Builds the full transaction config (gas, legacy gas price, nonce, chain id,
call data) for ``withdraw(amount)`` without sending it, and reads the
token balance of the sender.

Run this example:
    PARENT_RPC=https://rpc.sepolia.org \\
    CHILD_RPC=https://rpc-amoy.polygon.technology \\
    TOKEN=0x... SENDER=0x... \\
    python examples/prepare_withdraw.py
"""

import asyncio
import os

from posbridge import (
    BaseToken,
    BridgeClient,
    BridgeClientConfig,
    ChainConfig,
    ChainSide,
    ContractInitParam,
    Network,
    configure_logging,
)


class ChildERC20(BaseToken):
    async def get_balance(self, owner: str) -> int:
        contract = await self.get_contract()
        return await self.process_read(contract.method("balanceOf", owner))

    async def withdraw_start(self, amount: int, option=None):
        self.check_for_child("withdrawStart")
        contract = await self.get_contract()
        return await self.process_write(contract.method("withdraw", amount), option)


async def main() -> None:
    configure_logging("DEBUG")

    client = BridgeClient.from_config(BridgeClientConfig(
        network=Network.TESTNET,
        version="amoy",
        parent=ChainConfig(rpc_url=os.environ["PARENT_RPC"], dynamic_fees=True),
        child=ChainConfig(rpc_url=os.environ["CHILD_RPC"]),
        log=True,
    ))

    sender = os.environ["SENDER"]
    token = ChildERC20(
        ContractInitParam(address=os.environ["TOKEN"], name="ChildERC20", side=ChainSide.CHILD),
        client,
    )

    print(f"Balance: {await token.get_balance(sender)}")

    config = await token.withdraw_start(10**18, {"from": sender, "returnTransaction": True})
    print("Unsigned withdraw transaction:")
    for key, value in config.to_tx_params().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    asyncio.run(main())
