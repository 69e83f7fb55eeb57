"""Infrastructure: configuration, logging, database and data store gateways."""
