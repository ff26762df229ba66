"""Chess board representation, move generation, evaluation and search."""