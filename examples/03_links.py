"""
Send-money links - Create, inspect and accept
"""
import asyncio
from paypy import PayPayClient, LinkNotPending, PasscodeRequired


async def main():
    async with PayPayClient(access_token="...", client_uuid="...", device_uuid="...") as paypay:
        
        # Create a link for 500 JPY
        link = await paypay.create_link(500)
        print(f"Share this link: {link.link}")
        
        # Inspect a link received from someone else
        info = await paypay.get_link_info("https://pay.paypay.ne.jp/XXXXXXXXXXXXXXXX")
        print(f"{info.sender_name} sent {info.amount} JPY ({info.order_status})")
        
        # Accept it
        try:
            await paypay.accept_link(info.verification_code)
        except PasscodeRequired:
            await paypay.accept_link(info.verification_code, passcode=input("Passcode: "))
        except LinkNotPending as e:
            print(f"Cannot accept: {e.status}")
        
        # Or send directly to a known user
        await paypay.send_money(100, "external-user-id")


if __name__ == "__main__":
    asyncio.run(main())
