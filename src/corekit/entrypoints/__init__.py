"""Entrypoints (inbound adapters) for COREKIT.

Expose the domain to the outside world. Parse and validate raw inputs, call
the domain functions, and present their results.

Dependency rule: may import `corekit.domain` and `corekit.config`; the domain
must never import from here.
"""
