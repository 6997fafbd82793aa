"""
API server package: HTTP/JSON interface.

Decodes request bodies, hands them to the validation layer and serializes the
results of the crypto and instruction modules. Holds no state between requests.
"""
