"""Chess board representation, piece moves, heuristics and search."""