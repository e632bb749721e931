"""
Vets: domain records, persistence and the `VetManager`.
"""
