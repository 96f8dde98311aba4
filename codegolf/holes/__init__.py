"""Generators of arguments and expected output for each hole."""