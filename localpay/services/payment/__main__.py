from localpay.services.payment.main import run

run()
