from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["home"])

HOME_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Receipt Processing</title>
</head>
<body>
    <h1>Receipt Processing</h1>
    <form id="jsonForm" method="post">
        <label for="jsonData">JSON Data:</label>
        <textarea id="jsonData" name="jsonData" rows="10" cols="50" required></textarea><br><br>
        <input type="submit" value="Submit">
    </form>
    <script>
        document.getElementById("jsonForm").addEventListener("submit", function (event) {
            event.preventDefault();
            fetch("/receipts/process", {
                method: "POST",
                headers: {"Content-Type": "application/json", "Accept": "text/html"},
                body: document.getElementById("jsonData").value
            })
            .then(response => response.text())
            .then(data => { document.body.innerHTML = data; })
            .catch(error => {
                console.error("Error:", error);
                alert("Failed to process the receipt. Please try again.");
            });
        });
    </script>
</body>
</html>
"""

@router.get("/", response_class=HTMLResponse)
def home():
    return HOME_PAGE
