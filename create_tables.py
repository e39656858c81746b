#!/usr/bin/env python3
"""
Script to create database tables
Run this after the database is created to set up all tables
"""
import sys
import os

# Add the app directory to the path
app_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'app')
sys.path.insert(0, app_dir)

from charity_events.database import Base, build_engine
from charity_events.models.category_model import Category
from charity_events.models.organization_model import Organization
from charity_events.models.event_model import Event
from charity_events.models.registration_model import Registration

def create_tables(engine=None):
    """Create all database tables"""
    engine = engine or build_engine()
    try:
        print("Creating database tables...")
        Base.metadata.create_all(bind=engine)
        print("Database tables created successfully")
        return True
    except Exception as e:
        print(f"Error creating tables: {e}")
        return False

if __name__ == "__main__":
    if not create_tables():
        sys.exit(1)
