"""Game-data tree nodes and extractors for items, maps, mobs, quests and skills."""