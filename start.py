"""
Startup script for the Jewellery Rate Calculator
This script seeds the default configuration and starts the application
"""
import asyncio
import subprocess
import sys

async def prepare():
    try:
        from app.database import connect_to_mongo, close_mongo_connection
        from app.services.config_service import ensure_default_config
        await connect_to_mongo()
        print("✅ MongoDB connection successful")

        if await ensure_default_config():
            print("🔧 Default gold and silver rates stored")
        else:
            print("✅ Saved configuration found")
        await close_mongo_connection()
    except Exception as e:
        print(f"❌ Database connection failed: {e}")
        print("\n📋 Please ensure MongoDB is running and MONGODB_URL is set")
        return False
    return True

def main():
    print("=" * 60)
    print("💍 JEWELLERY RATE CALCULATOR STARTUP")
    print("=" * 60)

    if not asyncio.run(prepare()):
        sys.exit(1)

    print("📱 Application will be available at: http://localhost:8000")
    print("   Gold:   POST /calculators/gold")
    print("   Silver: POST /calculators/silver")
    print("=" * 60)

    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "main:app",
            "--host", "0.0.0.0",
            "--port", "8000",
        ])
    except KeyboardInterrupt:
        print("\n👋 Shutting down...")

if __name__ == "__main__":
    main()
