"""
Terminal client package.

Talks to the equipment REST API over HTTP and keeps all searching,
filtering and sorting on the client side:

  - api_client.py -> HTTP calls and error normalization
  - filters.py    -> search / status filter / sort pipeline
  - form.py       -> add/edit form validation
  - cli.py        -> ``equipment-tracker`` click commands
"""
