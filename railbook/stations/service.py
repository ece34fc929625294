from typing import Optional, Tuple

from railbook.exceptions import NotFoundError
from railbook.stations.schemas import Station
from railbook.storage.record_store import RecordStore

class StationService:
    def __init__(self, store: RecordStore):
        self.store = store
    
    def get_station(self, station_id: int) -> Station:
        """Get station by ID"""
        station = self.store.stations.get(station_id)
        if station is None:
            raise NotFoundError("Station not found")
        return station
    
    def find_by_name(self, name: str) -> Optional[Tuple[int, Station]]:
        """
        Resolve a station name reference.
        
        Stations are scanned in ascending id order and the first station
        carrying ``name`` wins; names are not required to be unique.
        """
        for station_id, station in self.store.stations.iterate():
            if station.name == name:
                return station_id, station
        return None
    
    def name_exists(self, name: str) -> bool:
        return self.find_by_name(name) is not None
