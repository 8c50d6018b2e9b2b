"""Payment domain - payment intents, card confirmation and the payment flow"""
