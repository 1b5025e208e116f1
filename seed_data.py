#!/usr/bin/env python3

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from railbook.database import Base, SessionLocal, engine
from railbook.models import Train, TrainStatus

ALL_CLASSES = {"sleeper": True, "3ac": True, "2ac": True, "1ac": True}
DAILY = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

def create_seed_data():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        print("🚀 Creating seed data for the railway booking system...")

        # Clear existing data (in reverse dependency order)
        print("Clearing existing data...")
        db.query(TrainStatus).delete()
        db.query(Train).delete()

        # 1. Create Trains
        print("Creating trains...")
        trains = [
            Train(train_number="12301", train_name="Howrah Rajdhani Express",
                  source_station="New Delhi", destination_station="Howrah Junction",
                  departure_time="16:55", arrival_time="09:55", duration="17h 00m",
                  base_fare=Decimal("1000.00"), available_classes={"3ac": True, "2ac": True, "1ac": True},
                  runs_on=DAILY, total_seats=72),
            Train(train_number="12951", train_name="Mumbai Rajdhani Express",
                  source_station="Mumbai Central", destination_station="New Delhi",
                  departure_time="17:00", arrival_time="08:32", duration="15h 32m",
                  base_fare=Decimal("950.00"), available_classes={"3ac": True, "2ac": True, "1ac": True},
                  runs_on=DAILY, total_seats=72),
            Train(train_number="12627", train_name="Karnataka Express",
                  source_station="KSR Bengaluru", destination_station="New Delhi",
                  departure_time="19:20", arrival_time="09:00", duration="37h 40m",
                  base_fare=Decimal("650.00"), available_classes=ALL_CLASSES,
                  runs_on=DAILY, total_seats=72),
            Train(train_number="12622", train_name="Tamil Nadu Express",
                  source_station="New Delhi", destination_station="Chennai Central",
                  departure_time="22:30", arrival_time="07:10", duration="32h 40m",
                  base_fare=Decimal("600.00"), available_classes=ALL_CLASSES,
                  runs_on=DAILY, total_seats=72),
            Train(train_number="12002", train_name="Bhopal Shatabdi",
                  source_station="New Delhi", destination_station="Bhopal Junction",
                  departure_time="06:00", arrival_time="14:40", duration="8h 40m",
                  base_fare=Decimal("450.00"), available_classes={"sleeper": True, "3ac": True},
                  runs_on=DAILY, total_seats=72),
            Train(train_number="12260", train_name="Sealdah Duronto Express",
                  source_station="New Delhi", destination_station="Sealdah",
                  departure_time="19:40", arrival_time="12:35", duration="16h 55m",
                  base_fare=Decimal("900.00"), available_classes={"sleeper": True, "3ac": True, "2ac": True},
                  runs_on=["Mon", "Wed", "Fri"], total_seats=72),
        ]
        db.add_all(trains)
        db.flush()

        # 2. Create live status rows
        print("Creating train status updates...")
        now = datetime.now(timezone.utc)
        statuses = [
            TrainStatus(train_id=trains[0].id, current_station="Kanpur Central",
                        expected_arrival="09:55", delay_minutes=0, status="On Time",
                        last_updated=now - timedelta(minutes=40)),
            TrainStatus(train_id=trains[0].id, current_station="Allahabad Junction",
                        expected_arrival="10:10", delay_minutes=15, status="Delayed",
                        last_updated=now - timedelta(minutes=5)),
            TrainStatus(train_id=trains[1].id, current_station="Vadodara Junction",
                        expected_arrival="08:32", delay_minutes=0, status="On Time",
                        last_updated=now - timedelta(minutes=12)),
        ]
        db.add_all(statuses)

        # Commit all changes
        db.commit()
        print("✅ Successfully created seed data!")
        print(f"Created:")
        print(f"  - {len(trains)} trains")
        print(f"  - {len(statuses)} train status updates")

    except Exception as e:
        print(f"❌ Error creating seed data: {e}")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == "__main__":
    create_seed_data()
