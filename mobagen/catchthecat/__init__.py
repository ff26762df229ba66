"""Catch the Cat: a hexagonal board game with cat and catcher agents."""