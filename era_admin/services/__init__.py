"""服務層：資料列存取與各個檢視的讀寫規則"""
