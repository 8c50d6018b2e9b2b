"""Domain packages, one per API resource"""
