class ParcelStoreAPI(object):
    """
    Contract for how code talks to parcel storage.
    Implementation can use any DB-API driver,
    but must keep the same method names and parameters.
    """

    def add(self, parcel):
        raise NotImplementedError()

    def get(self, number):
        raise NotImplementedError()

    def get_by_client(self, client):
        raise NotImplementedError()

    def set_status(self, number, status):
        raise NotImplementedError()

    def set_address(self, number, address):
        raise NotImplementedError()

    def delete(self, number):
        raise NotImplementedError()
