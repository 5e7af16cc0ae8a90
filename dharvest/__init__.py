"""dharvest — CLI docharvest (parse / serve / actions)."""
