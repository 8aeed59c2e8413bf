"""Core: dominio, contratos y servicios del binder (sin I/O de CLI)."""
