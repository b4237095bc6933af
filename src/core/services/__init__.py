# charity-ledger: core services
# Cross-cutting services injected into the ledger facade
