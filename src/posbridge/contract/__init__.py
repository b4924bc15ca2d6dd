from posbridge.contract.loader import ContractLazyLoader

__all__ = ["ContractLazyLoader"]
