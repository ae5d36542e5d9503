"""
Flower shop order lifecycle service
"""
