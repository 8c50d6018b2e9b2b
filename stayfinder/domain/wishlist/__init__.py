"""Wishlist domain"""
