"""netmime.logging – Project logger naming, configuration and lookup tracing."""
