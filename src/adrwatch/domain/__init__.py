"""Domain layer for adrwatch"""
