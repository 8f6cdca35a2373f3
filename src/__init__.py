"""SplitSync shared-expense ledger."""
