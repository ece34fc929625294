from railbook.exceptions import NotFoundError
from railbook.storage.record_store import RecordStore
from railbook.trains.schemas import Train

class TrainService:
    def __init__(self, store: RecordStore):
        self.store = store
    
    def get_train(self, train_id: int) -> Train:
        """Get train by ID"""
        train = self.store.trains.get(train_id)
        if train is None:
            raise NotFoundError("Train not found")
        return train

