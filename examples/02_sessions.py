"""
Session management - Save and resume tokens

The library never stores anything; persisting the session is up to you.
"""
import asyncio
from pathlib import Path

from paypy import PayPayClient, Session, TokenRevoked

SESSION_FILE = Path("paypay_session.json")


async def main():
    if SESSION_FILE.exists():
        paypay = PayPayClient.from_session(Session.from_json(SESSION_FILE.read_text()))
    else:
        paypay = PayPayClient()
        result = await paypay.login("09012345678", "password")
        if result.otp_required:
            await paypay.login_otp(result.otp_reference_id, input("OTP: "))
        SESSION_FILE.write_text(paypay.to_session().to_json())
    
    try:
        profile = await paypay.get_profile()
        print(f"Logged in as {profile.display_name}")
    except TokenRevoked:
        # The client stays "authenticated"; drop the saved token and log in again
        SESSION_FILE.unlink()
        print("Token revoked, run again to log in")
    finally:
        await paypay.close()


if __name__ == "__main__":
    asyncio.run(main())
