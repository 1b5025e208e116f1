from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from railbook.database import get_db
from railbook.status.schemas import StatusView
from railbook.status.service import TrainStatusService

router = APIRouter()

@router.get("/{train_number}", response_model=StatusView)
def get_train_status(
    train_number: str,
    db: Session = Depends(get_db)
):
    """Live status for a train number; poll every refresh_interval_seconds"""
    return TrainStatusService(db).project_status(train_number)
