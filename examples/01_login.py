"""
Basic usage - Login (with SMS verification) and check balance
"""
import asyncio
from paypy import PayPayClient


async def main():
    async with PayPayClient() as paypay:
        result = await paypay.login("090-1234-5678", "password")
        
        if result.otp_required:
            otp = input(f"SMS code sent to {result.otp_prefix}: ")
            await paypay.login_otp(result.otp_reference_id, otp)
        
        balance = await paypay.get_balance()
        print(f"Balance: {balance.balance} JPY")
        
        print("\nRecent history:")
        for record in await paypay.get_history(page_size=10):
            print(f"  {record.date_time} {record.order_type.value:<10} {record.amount:>7} {record.description}")


if __name__ == "__main__":
    asyncio.run(main())
