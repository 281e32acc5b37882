"""erpledger - finance ledger with per-operation account rules and payroll periods."""

__version__ = "0.1.0"


# Import main lazily so the domain layer can be used without click
def __getattr__(name):
    if name == "main":
        from erpledger.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
