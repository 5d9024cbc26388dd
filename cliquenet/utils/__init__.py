from .validation import ContractViolation, require

__all__ = ["ContractViolation", "require"]
