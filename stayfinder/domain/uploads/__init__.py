"""Uploads domain - image upload and URL resolution"""
