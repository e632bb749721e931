"""
Pets: domain records, persistence and the `PetManager`.
"""
