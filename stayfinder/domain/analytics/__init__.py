"""Analytics domain - dashboard statistics"""
