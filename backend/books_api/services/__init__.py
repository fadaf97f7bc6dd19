"""
Books API: Services Layer
===========================

Service Inventory:
    - DocumentStore (abstract): get/query/add/update/delete over a collection
    - FirestoreStore: DocumentStore backed by Firestore via the Firebase Admin SDK
    - BookService: the CRUD contract used by the /books routes
"""
