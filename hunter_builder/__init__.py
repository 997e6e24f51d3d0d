"""Hunter Builder - loadout stats planner."""
