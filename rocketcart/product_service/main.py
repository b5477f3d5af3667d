# rocketcart/product_service/main.py
from fastapi import FastAPI, HTTPException

app = FastAPI(title="Stock Service (dev mock)")


PRODUCTS = {
    1: {"id": 1, "title": "Tenis de Caminhada Leve Confortavel", "price": 179.9,
        "image": "https://rocketseat-cdn.s3-sa-east-1.amazonaws.com/modulo-redux/tenis1.jpg"},
    2: {"id": 2, "title": "Tenis VR Caminhada Confortavel Detalhes Couro Masculino", "price": 139.9,
        "image": "https://rocketseat-cdn.s3-sa-east-1.amazonaws.com/modulo-redux/tenis2.jpg"},
    3: {"id": 3, "title": "Tenis Adidas Duramo Lite 2.0", "price": 219.9,
        "image": "https://rocketseat-cdn.s3-sa-east-1.amazonaws.com/modulo-redux/tenis3.jpg"},
}

STOCK = {
    1: {"id": 1, "amount": 3},
    2: {"id": 2, "amount": 5},
    3: {"id": 3, "amount": 2},
}


@app.get("/products/{product_id}")
def get_product(product_id: int):
    product = PRODUCTS.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@app.get("/stock/{product_id}")
def get_stock(product_id: int):
    stock = STOCK.get(product_id)
    if not stock:
        raise HTTPException(status_code=404, detail="Stock not found")
    return stock
