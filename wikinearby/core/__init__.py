# Core infrastructure: logging, errors, geometry and dependency wiring
