# cms-listing-build: Core (entities, ports, errors)
