"""Review domain - review API, review form and helpful votes"""
