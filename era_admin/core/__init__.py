"""核心模組：資料庫、日誌與錯誤處理"""
