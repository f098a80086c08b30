# Core package: result type, configuration, clock, logging and API helpers
