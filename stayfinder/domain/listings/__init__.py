"""Listing domain - listing API, schemas and detail view"""
